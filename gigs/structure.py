"""
Structural comparisons shared by the entity tests.

Each function takes the object, the expected values and the path used in
failure messages. A structural mismatch is always a hard failure.
"""
from typing import Any, Optional, Sequence

from .asserts import ConformanceFailure, assert_close, assert_equal, assert_length, assert_not_none
from .naming import assert_name_equals, assert_unicode_identifier_equals, get_name
from .referencing import AxisDirection
from .units import Unit, Units

# Half a unit of the last digit given in the EPSG dataset.
LINEAR_TOLERANCE = 5e-4
ANGULAR_TOLERANCE = 5e-8
IVF_TOLERANCE = 5e-10

# Expected axis directions of common coordinate systems.
GEOGRAPHIC_2D = (AxisDirection.NORTH, AxisDirection.EAST)
GEOGRAPHIC_XY = (AxisDirection.EAST, AxisDirection.NORTH)
GEOGRAPHIC_3D = (AxisDirection.NORTH, AxisDirection.EAST, AxisDirection.UP)
GEOCENTRIC = (AxisDirection.GEOCENTRIC_X, AxisDirection.GEOCENTRIC_Y, AxisDirection.GEOCENTRIC_Z)


def _directions_text(directions: Sequence[Any]) -> str:
    return "[" + ", ".join(getattr(d, "value", str(d)) for d in directions) + "]"


def verify_axis_directions(cs: Any, expected: Sequence[AxisDirection], path: str) -> None:
    """
    Check the number and the directions of the axes of a coordinate system.

    The whole direction list is reported on mismatch, e.g.
    'GeodeticCRS.coordinate_system.axes[*].direction: expected [north, east] but got [east, north].'
    """
    cs = assert_not_none(cs, path)
    axes = list(assert_not_none(cs.axes, f"{path}.axes"))
    assert_length(len(expected), axes, f"{path}.axes")
    actual = [getattr(axis, "direction", None) for axis in axes]
    if actual != list(expected):
        raise ConformanceFailure(
            f"{path}.axes[*].direction: expected {_directions_text(expected)} but got {_directions_text(actual)}.",
            path=f"{path}.axes[*].direction", expected=list(expected), actual=actual,
        )


def verify_coordinate_system(
    cs: Any,
    directions: Sequence[AxisDirection],
    units: Sequence[Unit],
    path: str,
) -> None:
    """
    Check axis directions and units. If fewer units than axes are given,
    the last unit applies to the remaining axes.
    """
    verify_axis_directions(cs, directions, path)
    for i, axis in enumerate(cs.axes):
        expected = units[min(i, len(units) - 1)]
        assert_equal(expected, axis.unit, f"{path}.axes[{i}].unit")


def verify_axis(
    axis: Any,
    name: str,
    abbreviation: str,
    direction: AxisDirection,
    unit: Unit,
    path: str,
) -> None:
    axis = assert_not_none(axis, path)
    assert_name_equals(name, get_name(axis), f"{path}.name")
    assert_equal(abbreviation, axis.abbreviation, f"{path}.abbreviation")
    assert_equal(direction, axis.direction, f"{path}.direction")
    assert_equal(unit, axis.unit, f"{path}.unit")


def verify_ellipsoid(
    ellipsoid: Any,
    semi_major_axis: float,
    axis_unit: Unit,
    path: str,
    inverse_flattening: Optional[float] = None,
    semi_minor_axis: Optional[float] = None,
) -> None:
    """
    Check the defining parameters of an ellipsoid.

    Axis lengths are converted from the implementation's unit to the expected
    one, so an implementation storing every length in metres still passes.
    """
    ellipsoid = assert_not_none(ellipsoid, path)
    unit = assert_not_none(ellipsoid.axis_unit, f"{path}.axis_unit")
    tolerance = Units.METRE.convert_to(LINEAR_TOLERANCE, axis_unit)
    assert_close(semi_major_axis, unit.convert_to(ellipsoid.semi_major_axis, axis_unit),
                 tolerance, f"{path}.semi_major_axis")
    if semi_minor_axis is not None:
        assert_close(semi_minor_axis, unit.convert_to(ellipsoid.semi_minor_axis, axis_unit),
                     tolerance, f"{path}.semi_minor_axis")
    if inverse_flattening is not None:
        assert_close(inverse_flattening, ellipsoid.inverse_flattening,
                     IVF_TOLERANCE * inverse_flattening, f"{path}.inverse_flattening")


def verify_prime_meridian(prime_meridian: Any, greenwich_longitude: float, angular_unit: Unit, path: str) -> None:
    prime_meridian = assert_not_none(prime_meridian, path)
    unit = assert_not_none(prime_meridian.angular_unit, f"{path}.angular_unit")
    assert_close(greenwich_longitude, unit.convert_to(prime_meridian.greenwich_longitude, angular_unit),
                 Units.DEGREE.convert_to(ANGULAR_TOLERANCE, angular_unit), f"{path}.greenwich_longitude")


def verify_anchor_point(datum: Any, expected: Optional[str], path: str) -> None:
    if expected is None:
        return
    actual = assert_not_none(getattr(datum, "anchor_point", None), f"{path}.anchor_point")
    assert_equal(expected, str(actual), f"{path}.anchor_point")


def verify_identification(obj: Any, name: Optional[str], code: Optional[str], path: str) -> None:
    """
    Loose identification check of user-defined objects.

    Only the identifier characters of the name are compared, ignoring case, and
    the identifiers may contain other codes as long as one matches.
    """
    if obj is None:
        return
    if name is not None:
        assert_unicode_identifier_equals(name, get_name(obj), f"{path}.name", ignore_case=True)
    if code is not None:
        for identifier in getattr(obj, "identifiers", None) or ():
            assert_not_none(identifier, f"{path}.identifiers")
            if str(identifier.code).lower() == str(code).lower():
                return
        raise ConformanceFailure(
            f"{path}.identifiers: element “{code}” not found.",
            path=f"{path}.identifiers", expected=code,
        )


__all__ = [
    "GEOGRAPHIC_2D",
    "GEOGRAPHIC_XY",
    "GEOGRAPHIC_3D",
    "GEOCENTRIC",
    "verify_axis_directions",
    "verify_coordinate_system",
    "verify_axis",
    "verify_ellipsoid",
    "verify_prime_meridian",
    "verify_anchor_point",
    "verify_identification",
]
