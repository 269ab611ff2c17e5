"""
Internal consistency checks run on every object before it is compared.

These checks do not use any expected value: they only verify that an object
agrees with itself (an ellipsoid's axes and flattening, a coordinate system's
axes, a CRS's components). A test suite may supply its own ``Validators``
instance, for example a stricter one or one accepting missing units.
"""
import math
from typing import Any, List, Optional

from .asserts import ConformanceFailure, fail
from .naming import get_name
from .referencing import AxisDirection
from .units import Quantity, Units

# Relative tolerance between the semi-minor axis and the one computed from the flattening.
AXIS_TOLERANCE = 1e-9


class Validators:
    """
    Dispatches an object to the checks matching the attributes it exposes.

    Usage:
        validators = Validators()
        validators.validate(crs)
    """

    def __init__(self, require_identifiers: bool = False):
        """
        Args:
            require_identifiers: If True, objects without identifiers are rejected
        """
        self.require_identifiers = require_identifiers

    def validate(self, obj: Any, path: Optional[str] = None) -> None:
        """
        Check an object and the components it holds.

        Raises:
            ConformanceFailure: If the object is inconsistent
        """
        if obj is None:
            return
        path = path or type(obj).__name__
        self.validate_identification(obj, path)
        if hasattr(obj, "semi_major_axis"):
            self.validate_ellipsoid(obj, path)
        if hasattr(obj, "greenwich_longitude"):
            self.validate_prime_meridian(obj, path)
        if hasattr(obj, "ellipsoid"):
            self.validate(obj.ellipsoid, f"{path}.ellipsoid")
            self.validate(getattr(obj, "prime_meridian", None), f"{path}.prime_meridian")
        if hasattr(obj, "axes"):
            self.validate_coordinate_system(obj, path)
        if hasattr(obj, "coordinate_system"):
            if obj.coordinate_system is None:
                fail("coordinate system is missing.", f"{path}.coordinate_system")
            self.validate(obj.coordinate_system, f"{path}.coordinate_system")
            self.validate(getattr(obj, "datum", None), f"{path}.datum")

    def validate_identification(self, obj: Any, path: str) -> None:
        name = get_name(obj)
        if not name or not name.strip():
            fail("name is missing or empty.", f"{path}.name")
        identifiers = getattr(obj, "identifiers", None) or ()
        for identifier in identifiers:
            if identifier is None:
                fail("null element in identifiers.", f"{path}.identifiers")
            if not str(getattr(identifier, "code", "")).strip():
                fail("identifier without code.", f"{path}.identifiers")
        if self.require_identifiers and not identifiers:
            fail("identifiers are missing.", f"{path}.identifiers")

    def validate_ellipsoid(self, ellipsoid: Any, path: str) -> None:
        a = ellipsoid.semi_major_axis
        b = ellipsoid.semi_minor_axis
        if not (a > 0 and b > 0):
            fail(f"axis lengths must be positive (a={a}, b={b}).", path)
        if b > a:
            fail(f"semi-minor axis {b} is greater than semi-major axis {a}.", f"{path}.semi_minor_axis")
        unit = getattr(ellipsoid, "axis_unit", None)
        if unit is not None and unit.quantity is not Quantity.LENGTH:
            fail(f"axis unit {unit} is not a length.", f"{path}.axis_unit")
        if ellipsoid.is_sphere:
            if a != b:
                fail(f"a sphere must have equal axes (a={a}, b={b}).", f"{path}.is_sphere")
            return
        ivf = ellipsoid.inverse_flattening
        if ivf is None or math.isinf(ivf) or ivf <= 0:
            return
        expected = a * (1 - 1 / ivf)
        if abs(expected - b) > AXIS_TOLERANCE * a:
            raise ConformanceFailure(
                f"{path}.semi_minor_axis: inconsistent with inverse flattening "
                f"(expected {expected!r} but got {b!r}).",
                path=f"{path}.semi_minor_axis", expected=expected, actual=b,
            )

    def validate_prime_meridian(self, prime_meridian: Any, path: str) -> None:
        unit = getattr(prime_meridian, "angular_unit", None) or Units.DEGREE
        if unit.quantity is not Quantity.ANGLE:
            fail(f"angular unit {unit} is not an angle.", f"{path}.angular_unit")
        longitude = unit.convert_to(prime_meridian.greenwich_longitude, Units.DEGREE)
        if not -180 <= longitude <= 180:
            fail(f"Greenwich longitude {longitude}° out of range.", f"{path}.greenwich_longitude")

    def validate_coordinate_system(self, cs: Any, path: str) -> None:
        axes: List[Any] = list(cs.axes or ())
        if not axes:
            fail("coordinate system has no axis.", f"{path}.axes")
        seen = set()
        for i, axis in enumerate(axes):
            axis_path = f"{path}.axes[{i}]"
            if axis is None:
                fail("axis is missing.", axis_path)
            if not isinstance(axis.direction, AxisDirection):
                fail(f"unknown axis direction {axis.direction!r}.", f"{axis_path}.direction")
            if axis.direction in seen:
                fail(f"direction {axis.direction.value} used by more than one axis.", f"{axis_path}.direction")
            seen.add(axis.direction)
            if axis.unit is None:
                fail("axis unit is missing.", f"{axis_path}.unit")
            if not getattr(axis, "abbreviation", None):
                fail("axis abbreviation is missing.", f"{axis_path}.abbreviation")


__all__ = [
    "Validators",
]
