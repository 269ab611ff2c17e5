import pytest

from gigs.units import IncommensurableUnitsError, Quantity, Units


def test_length_conversion():
    # 1 US survey foot = 1200/3937 m
    assert Units.US_SURVEY_FOOT.convert_to(3937.0, Units.METRE) == pytest.approx(1200.0)
    assert Units.FOOT.convert_to(1.0, Units.METRE) == pytest.approx(0.3048)
    assert Units.KILOMETRE.convert_to(6378.137, Units.METRE) == pytest.approx(6378137.0)


def test_angle_conversion():
    # Paris meridian: 2.5969213 grad = 2.33722917 degrees
    assert Units.GRAD.convert_to(2.5969213, Units.DEGREE) == pytest.approx(2.33722917, abs=1e-12)
    assert Units.ARC_SECOND.convert_to(3600.0, Units.DEGREE) == pytest.approx(1.0)


def test_same_unit_is_unchanged():
    assert Units.DEGREE.convert_to(10.722916666666666, Units.DEGREE) == 10.722916666666666


def test_incommensurable_units():
    with pytest.raises(IncommensurableUnitsError):
        Units.METRE.convert_to(1.0, Units.DEGREE)
    assert not Units.UNITY.is_compatible(Units.METRE)
    assert Units.PPM.quantity is Quantity.SCALE


def test_lookup():
    assert Units.by_code(9001) is Units.METRE
    assert Units.by_name("US survey foot") is Units.US_SURVEY_FOOT
    assert Units.by_name(" Degree ") is Units.DEGREE
    assert Units.by_name("league") is None
    with pytest.raises(KeyError):
        Units.by_code(1)
