import pytest

from gigs.asserts import ConformanceFailure
from gigs.parameters import (
    ExpectedParameter,
    InvalidParameterTypeError,
    ParameterGroup,
    ParameterNotFoundError,
    ParameterStateError,
    SimpleParameter,
    UnsupportedOperationError,
)
from gigs.units import IncommensurableUnitsError, Units


def test_measure_accessors():
    p = SimpleParameter.of_measure("Semi-major axis", 6378.137, Units.KILOMETRE)
    assert p.double_value() == 6378.137
    assert p.double_value(Units.METRE) == pytest.approx(6378137.0)
    assert p.value_type is float
    assert p.descriptor is p
    assert (p.minimum_occurs, p.maximum_occurs) == (1, 1)
    with pytest.raises(InvalidParameterTypeError):
        p.string_value()
    with pytest.raises(IncommensurableUnitsError):
        p.double_value(Units.DEGREE)


def test_string_accessors():
    p = SimpleParameter.of_string("Latitude and longitude difference file", "ntv2_0.gsb")
    assert p.string_value() == "ntv2_0.gsb"
    with pytest.raises(InvalidParameterTypeError):
        p.double_value()
    with pytest.raises(ParameterStateError):
        p.double_value(Units.METRE)


def test_int_and_boolean_accessors():
    assert SimpleParameter("Zone", 31.0).int_value() == 31
    with pytest.raises(InvalidParameterTypeError):
        SimpleParameter("Zone", 31.5).int_value()
    assert SimpleParameter("Flag", True).boolean_value() is True
    with pytest.raises(InvalidParameterTypeError):
        SimpleParameter("Flag", 1).boolean_value()


def test_parameters_are_immutable():
    p = SimpleParameter.of_measure("False easting", 500000.0, Units.METRE)
    for mutate in (
        lambda: p.set_value(0.0),
        lambda: p.set_double_value(0.0, Units.METRE),
        lambda: p.set_int_value(0),
        lambda: p.set_boolean_value(False),
        lambda: p.set_string_value(""),
    ):
        with pytest.raises(UnsupportedOperationError):
            mutate()
    assert p.value == 500000.0


def test_group_lookup_ignores_case():
    group = ParameterGroup("Transverse Mercator", [
        SimpleParameter.of_measure("False easting", 500000.0, Units.METRE),
        SimpleParameter.of_measure("False northing", 0.0, Units.METRE),
    ])
    assert group.parameter("false EASTING").value == 500000.0
    assert len(group) == 2
    assert [p.name for p in group] == ["False easting", "False northing"]
    with pytest.raises(ParameterNotFoundError) as info:
        group.parameter("Scale factor at natural origin")
    assert "Scale factor at natural origin" in str(info.value)


def test_expected_parameter_compares_in_its_unit():
    group = ParameterGroup("TM", [SimpleParameter.of_measure("Longitude of natural origin", 200.0, Units.GRAD)])
    ExpectedParameter("Longitude of natural origin", 180.0, Units.DEGREE).verify(group)
    with pytest.raises(ConformanceFailure):
        ExpectedParameter("Longitude of natural origin", 181.0, Units.DEGREE).verify(group)
    with pytest.raises(ConformanceFailure):
        ExpectedParameter("False easting", 0.0, Units.METRE).verify(group)


def test_expected_string_parameter():
    group = ParameterGroup("NTv2", [SimpleParameter.of_string("Latitude and longitude difference file", "a.gsb")])
    ExpectedParameter("Latitude and longitude difference file", "a.gsb").verify(group)
    with pytest.raises(ConformanceFailure):
        ExpectedParameter("Latitude and longitude difference file", "b.gsb").verify(group)
