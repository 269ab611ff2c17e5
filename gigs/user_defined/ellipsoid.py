"""User-defined ellipsoids (GIGS 3202)."""
import math
from typing import Any, Optional

from ..asserts import assert_close, assert_equal, assert_not_none
from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..referencing import DatumFactory
from ..structure import IVF_TOLERANCE
from ..units import Unit, Units
from ..validators import Validators
from .base import PRESERVING, UserObjectTest


class UserEllipsoidTest(UserObjectTest):
    """
    Attributes:
        semi_major_in_metres: Semi-major axis converted to metres
        semi_major_axis: Semi-major axis in ``axis_unit``
        semi_minor_axis: Semi-minor axis in ``axis_unit``
        axis_unit: Unit given to the factory
        axis_tolerance: Tolerance on echoed axis lengths, in ``axis_unit``
        inverse_flattening: Inverse flattening (infinite for a sphere)
        is_ivf_definitive: Whether the ellipsoid is built from the inverse flattening
        is_sphere: Whether both axes are equal
    """

    series = 3202
    type_name = "Ellipsoid"
    factory_roles = (ConfigurationKey.DATUM_FACTORY,)

    def __init__(
        self,
        datum_factory: Optional[DatumFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_factory = datum_factory
        self.semi_major_in_metres = float("nan")
        self.semi_major_axis = float("nan")
        self.semi_minor_axis = float("nan")
        self.axis_unit: Unit = Units.METRE
        self.axis_tolerance = 0.0005
        self.inverse_flattening = math.inf
        self.is_ivf_definitive = False
        self.is_sphere = False

    def create_object(self) -> Any:
        factory = require_factory(self.datum_factory, "datum factory")
        if self.is_ivf_definitive:
            return factory.create_flattened_sphere(self.properties, self.semi_major_axis,
                                                   self.inverse_flattening, self.axis_unit)
        return factory.create_ellipsoid(self.properties, self.semi_major_axis,
                                        self.semi_minor_axis, self.axis_unit)

    def verify(self) -> None:
        if self.skip_tests:
            return
        ellipsoid = self.verify_object("Ellipsoid")
        if self.is_factory_preserving_user_values:
            ivf_tolerance = IVF_TOLERANCE if self.is_ivf_definitive else 0.0005
            assert_equal(self.axis_unit, ellipsoid.axis_unit, "Ellipsoid.axis_unit", key=PRESERVING)
            assert_close(self.semi_major_axis, ellipsoid.semi_major_axis, self.axis_tolerance,
                         "Ellipsoid.semi_major_axis", key=PRESERVING)
            assert_close(self.semi_minor_axis, ellipsoid.semi_minor_axis, self.axis_tolerance,
                         "Ellipsoid.semi_minor_axis", key=PRESERVING)
            if not math.isinf(self.inverse_flattening):
                assert_close(self.inverse_flattening, ellipsoid.inverse_flattening, ivf_tolerance,
                             "Ellipsoid.inverse_flattening", key=PRESERVING)
            assert_equal(self.is_ivf_definitive, ellipsoid.is_ivf_definitive, "Ellipsoid.is_ivf_definitive",
                         key=PRESERVING)
            assert_equal(self.is_sphere, ellipsoid.is_sphere, "Ellipsoid.is_sphere", key=PRESERVING)
        self.verify_identification(ellipsoid, "Ellipsoid")
        unit = assert_not_none(ellipsoid.axis_unit, "Ellipsoid.axis_unit")
        assert_close(self.semi_major_in_metres, unit.convert_to(ellipsoid.semi_major_axis, Units.METRE), 0.1,
                     "Ellipsoid.semi_major_axis")

    def _expect(self, code: int, name: str, semi_major_axis: float, semi_minor_axis: float,
                axis_unit: Unit = Units.METRE) -> None:
        self.set_code_and_name(code, name)
        self.semi_major_axis = semi_major_axis
        self.semi_minor_axis = semi_minor_axis
        self.axis_unit = axis_unit
        self.semi_major_in_metres = axis_unit.convert_to(semi_major_axis, Units.METRE)

    @gigs_case("GIGS ellipsoid A")
    def gigs_67030(self):
        self._expect(67030, "GIGS ellipsoid A", 6378137.0, 6356752.3)
        self.axis_tolerance = 0.05
        self.inverse_flattening = 298.257223563
        self.is_ivf_definitive = True
        self.verify()

    @gigs_case("GIGS ellipsoid B")
    def gigs_67001(self):
        self._expect(67001, "GIGS ellipsoid B", 6377563.396, 6356256.909)
        self.inverse_flattening = 299.3249646
        self.is_ivf_definitive = True
        self.verify()

    @gigs_case("GIGS ellipsoid C")
    def gigs_67004(self):
        self._expect(67004, "GIGS ellipsoid C", 6377397.155, 6356078.963)
        self.inverse_flattening = 299.1528128
        self.is_ivf_definitive = True
        self.verify()

    @gigs_case("GIGS ellipsoid E")
    def gigs_67022(self):
        self._expect(67022, "GIGS ellipsoid E", 6378388.0, 6356911.9)
        self.axis_tolerance = 0.05
        self.inverse_flattening = 297.0
        self.is_ivf_definitive = True
        self.verify()

    @gigs_case("GIGS ellipsoid F")
    def gigs_67019(self):
        self._expect(67019, "GIGS ellipsoid F", 6378.137, 6356.752, Units.KILOMETRE)
        self.inverse_flattening = 298.257222101
        self.is_ivf_definitive = True
        self.verify()

    @gigs_case("GIGS ellipsoid I")
    def gigs_67052(self):
        self._expect(67052, "GIGS ellipsoid I", 6370997.0, 6370997.0)
        self.axis_tolerance = 0.05
        self.is_sphere = True
        self.verify()


__all__ = [
    "UserEllipsoidTest",
]
