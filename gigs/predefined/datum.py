"""Geodetic (GIGS 2204) and vertical (GIGS 2209) datums created from EPSG codes."""
from typing import Any, Optional

from ..asserts import assert_not_none
from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..naming import assert_name_equals, get_name
from ..referencing import DatumAuthorityFactory
from ..validators import Validators
from .base import PredefinedObjectTest
from .ellipsoid import EllipsoidTest
from .prime_meridian import PrimeMeridianTest


class GeodeticDatumTest(PredefinedObjectTest):
    """
    Attributes:
        ellipsoid_name: Expected name of the datum's ellipsoid
        prime_meridian_name: Expected name of the datum's prime meridian
    """

    series = 2204
    type_name = "GeodeticDatum"
    factory_roles = (ConfigurationKey.DATUM_AUTHORITY_FACTORY,)

    def __init__(
        self,
        datum_authority_factory: Optional[DatumAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_authority_factory = datum_authority_factory
        self.ellipsoid_name: Optional[str] = None
        self.prime_meridian_name = "Greenwich"

    def create_object(self, code: str) -> Any:
        return require_factory(self.datum_authority_factory, "datum authority factory").create_geodetic_datum(code)

    def verify(self) -> None:
        datum = self.verify_object("GeodeticDatum")
        self.verify_identification(datum, "GeodeticDatum")
        ellipsoid = assert_not_none(datum.ellipsoid, "GeodeticDatum.ellipsoid")
        prime_meridian = assert_not_none(datum.prime_meridian, "GeodeticDatum.prime_meridian")
        if self.is_dependency_identification_supported:
            key = ConfigurationKey.IS_DEPENDENCY_IDENTIFICATION_SUPPORTED
            assert_name_equals(self.ellipsoid_name, get_name(ellipsoid), "GeodeticDatum.ellipsoid.name", key=key)
            assert_name_equals(self.prime_meridian_name, get_name(prime_meridian),
                               "GeodeticDatum.prime_meridian.name", key=key)

    def ellipsoid_test(self) -> EllipsoidTest:
        """Return a test verifying the ellipsoid of the datum under test."""
        test = EllipsoidTest(self.datum_authority_factory, self.overrides, self.validators)
        test.configure_as_dependency(self)
        test.set_identified_object(self.get_identified_object().ellipsoid)
        return test

    def prime_meridian_test(self) -> PrimeMeridianTest:
        """Return a test verifying the prime meridian of the datum under test."""
        test = PrimeMeridianTest(self.datum_authority_factory, self.overrides, self.validators)
        test.configure_as_dependency(self)
        test.set_identified_object(self.get_identified_object().prime_meridian)
        return test

    @gigs_case("World Geodetic System 1984")
    def epsg_6326(self):
        self.code = 6326
        self.name = "World Geodetic System 1984"
        self.aliases = ("WGS 84",)
        self.ellipsoid_name = "WGS 84"
        self.verify()
        self.ellipsoid_test().epsg_7030()
        self.prime_meridian_test().epsg_8901()

    @gigs_case("European Datum 1950")
    def epsg_6230(self):
        self.code = 6230
        self.name = "European Datum 1950"
        self.aliases = ("ED50",)
        self.ellipsoid_name = "International 1924"
        self.verify()
        self.ellipsoid_test().epsg_7022()

    @gigs_case("Nouvelle Triangulation Francaise (Paris)")
    def epsg_6807(self):
        self.code = 6807
        self.name = "Nouvelle Triangulation Francaise (Paris)"
        self.aliases = ("NTF (Paris)",)
        self.ellipsoid_name = "Clarke 1880 (IGN)"
        self.prime_meridian_name = "Paris"
        self.verify()
        self.prime_meridian_test().epsg_8903()


class VerticalDatumTest(PredefinedObjectTest):
    series = 2209
    type_name = "VerticalDatum"
    factory_roles = (ConfigurationKey.DATUM_AUTHORITY_FACTORY,)

    def __init__(
        self,
        datum_authority_factory: Optional[DatumAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_authority_factory = datum_authority_factory

    def create_object(self, code: str) -> Any:
        return require_factory(self.datum_authority_factory, "datum authority factory").create_vertical_datum(code)

    def verify(self) -> None:
        datum = self.verify_object("VerticalDatum")
        self.verify_identification(datum, "VerticalDatum")

    @gigs_case("Mean Sea Level")
    def epsg_5100(self):
        self.code = 5100
        self.name = "Mean Sea Level"
        self.aliases = ("MSL",)
        self.verify()

    @gigs_case("Ordnance Datum Newlyn")
    def epsg_5101(self):
        self.code = 5101
        self.name = "Ordnance Datum Newlyn"
        self.aliases = ("ODN", "Newlyn")
        self.verify()

    @gigs_case("North American Vertical Datum 1988")
    def epsg_5103(self):
        self.code = 5103
        self.name = "North American Vertical Datum 1988"
        self.aliases = ("NAVD88",)
        self.verify()


__all__ = [
    "GeodeticDatumTest",
    "VerticalDatumTest",
]
