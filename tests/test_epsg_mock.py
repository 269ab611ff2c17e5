import pytest
from dataclasses import replace

from gigs.asserts import ConformanceFailure
from gigs.epsg_mock import COORDINATE_SYSTEMS, SyntheticReferenceFactory
from gigs.referencing import AxisDirection, NoSuchAuthorityCodeError
from gigs.units import Units

from conftest import ReferenceFactory


@pytest.fixture()
def epsg(factory):
    return SyntheticReferenceFactory(factory, factory)


@pytest.mark.parametrize("code", sorted(COORDINATE_SYSTEMS))
def test_every_coordinate_system(epsg, code):
    kind = COORDINATE_SYSTEMS[code].kind
    cs = getattr(epsg, f"create_{kind}_cs")(code)
    assert len(cs.axes) == len(COORDINATE_SYSTEMS[code].axes)
    assert cs.identifiers[0].code == str(code)


def test_vertical_cs(epsg):
    cs = epsg.create_vertical_cs(6498)
    axis = cs.axes[0]
    assert (axis.name, axis.abbreviation, axis.direction, axis.unit) == (
        "Gravity-related depth", "D", AxisDirection.DOWN, Units.METRE)


def test_unknown_or_wrong_kind(epsg):
    with pytest.raises(NoSuchAuthorityCodeError):
        epsg.create_vertical_cs(9999)
    with pytest.raises(NoSuchAuthorityCodeError):
        epsg.create_vertical_cs(6422)
    with pytest.raises(NoSuchAuthorityCodeError):
        epsg.create_ellipsoid(7052)


def test_datum_components(epsg):
    datum = epsg.create_geodetic_datum(6326)
    assert datum.name == "World Geodetic System 1984"
    assert datum.ellipsoid.inverse_flattening == 298.257223563
    assert datum.prime_meridian.name == "Greenwich"

    paris = epsg.create_prime_meridian(8903)
    assert paris.angular_unit == Units.GRAD


def test_factory_ignoring_directions_is_caught():
    class Upward(ReferenceFactory):
        def create_coordinate_system_axis(self, props, abbreviation, direction, unit):
            axis = super().create_coordinate_system_axis(props, abbreviation, direction, unit)
            return replace(axis, direction=AxisDirection.UP)

    factory = Upward()
    with pytest.raises(ConformanceFailure) as info:
        SyntheticReferenceFactory(factory, factory).create_vertical_cs(6498)
    assert info.value.path == "EPSG:6498.axes[0].direction"
