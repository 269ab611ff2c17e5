"""Ellipsoids created from EPSG codes (GIGS 2202)."""
from typing import Any, Optional

from ..asserts import assert_equal
from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..referencing import DatumAuthorityFactory
from ..structure import verify_ellipsoid
from ..units import Unit, Units
from ..validators import Validators
from .base import PredefinedObjectTest


class EllipsoidTest(PredefinedObjectTest):
    """
    Attributes:
        semi_major_axis: Expected semi-major axis in ``axis_unit``
        semi_minor_axis: Expected semi-minor axis, or None if not a defining parameter
        inverse_flattening: Expected inverse flattening, or None if not a defining parameter
        axis_unit: Unit of the expected axis lengths
        is_sphere: Whether the figure of the Earth is a sphere
    """

    series = 2202
    type_name = "Ellipsoid"
    factory_roles = (ConfigurationKey.DATUM_AUTHORITY_FACTORY,)

    def __init__(
        self,
        datum_authority_factory: Optional[DatumAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_authority_factory = datum_authority_factory
        self.semi_major_axis: float = float("nan")
        self.semi_minor_axis: Optional[float] = None
        self.inverse_flattening: Optional[float] = None
        self.axis_unit: Unit = Units.METRE
        self.is_sphere = False

    def create_object(self, code: str) -> Any:
        return require_factory(self.datum_authority_factory, "datum authority factory").create_ellipsoid(code)

    def verify(self) -> None:
        ellipsoid = self.verify_object("Ellipsoid")
        self.verify_identification(ellipsoid, "Ellipsoid")
        verify_ellipsoid(ellipsoid, self.semi_major_axis, self.axis_unit, "Ellipsoid",
                         inverse_flattening=self.inverse_flattening, semi_minor_axis=self.semi_minor_axis)
        assert_equal(self.is_sphere, ellipsoid.is_sphere, "Ellipsoid.is_sphere")

    def _flattened_sphere(self, code: int, name: str, semi_major_axis: float, inverse_flattening: float) -> None:
        self.code = code
        self.name = name
        self.semi_major_axis = semi_major_axis
        self.inverse_flattening = inverse_flattening

    @gigs_case("Bessel 1841")
    def epsg_7004(self):
        self._flattened_sphere(7004, "Bessel 1841", 6377397.155, 299.1528128)
        self.verify()

    @gigs_case("GRS 1980")
    def epsg_7019(self):
        self._flattened_sphere(7019, "GRS 1980", 6378137.0, 298.257222101)
        self.aliases = ("International 1979",)
        self.verify()

    @gigs_case("International 1924")
    def epsg_7022(self):
        self._flattened_sphere(7022, "International 1924", 6378388.0, 297.0)
        self.aliases = ("Hayford 1909",)
        self.verify()

    @gigs_case("WGS 84")
    def epsg_7030(self):
        self._flattened_sphere(7030, "WGS 84", 6378137.0, 298.257223563)
        self.aliases = ("WGS84",)
        self.verify()

    @gigs_case("Clarke 1866 Authalic Sphere")
    def epsg_7052(self):
        self.code = 7052
        self.name = "Clarke 1866 Authalic Sphere"
        self.semi_major_axis = 6370997.0
        self.semi_minor_axis = 6370997.0
        self.is_sphere = True
        self.verify()


__all__ = [
    "EllipsoidTest",
]
