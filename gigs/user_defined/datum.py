"""User-defined geodetic (GIGS 3204) and vertical (GIGS 3209) datums."""
from typing import Any, Callable, Optional

from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..epsg_mock import SyntheticReferenceFactory
from ..lookup import require_factory
from ..referencing import ANCHOR_POINT_KEY, DatumFactory
from ..structure import verify_anchor_point
from ..validators import Validators
from .base import UserObjectTest
from .ellipsoid import UserEllipsoidTest
from .prime_meridian import UserPrimeMeridianTest


class UserGeodeticDatumTest(UserObjectTest):
    """
    The ellipsoid and prime meridian are either built by a case of the
    corresponding user-defined test, which then verifies them inside the datum,
    or rebuilt from EPSG values by the synthetic reference factory.
    """

    series = 3204
    type_name = "GeodeticDatum"
    factory_roles = (ConfigurationKey.DATUM_FACTORY,)

    def __init__(
        self,
        datum_factory: Optional[DatumFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_factory = datum_factory
        self.epsg = SyntheticReferenceFactory(datum_factory, None, self.validators)
        self.ellipsoid: Any = None
        self.prime_meridian: Any = None
        self.ellipsoid_test: Optional[UserEllipsoidTest] = None
        self.prime_meridian_test: Optional[UserPrimeMeridianTest] = None

    def set_origin(self, origin: str) -> None:
        if ANCHOR_POINT_KEY in self.properties:
            raise ValueError(f"Property “{ANCHOR_POINT_KEY}” is already set.")
        self.properties[ANCHOR_POINT_KEY] = origin

    def create_ellipsoid(self, case: Callable[[UserEllipsoidTest], None]) -> None:
        self.ellipsoid_test = self.build_with(
            UserEllipsoidTest(self.datum_factory, self.overrides, self.validators), case)
        self.ellipsoid = self.ellipsoid_test.get_identified_object()

    def create_prime_meridian(self, case: Callable[[UserPrimeMeridianTest], None]) -> None:
        self.prime_meridian_test = self.build_with(
            UserPrimeMeridianTest(self.datum_factory, self.overrides, self.validators), case)
        self.prime_meridian = self.prime_meridian_test.get_identified_object()

    def create_epsg_components(self, ellipsoid_code: int, prime_meridian_code: int) -> None:
        require_factory(self.datum_factory, "datum factory")
        self.ellipsoid = self.epsg.create_ellipsoid(ellipsoid_code)
        self.prime_meridian = self.epsg.create_prime_meridian(prime_meridian_code)

    def create_object(self) -> Any:
        factory = require_factory(self.datum_factory, "datum factory")
        return factory.create_geodetic_datum(self.properties, self.ellipsoid, self.prime_meridian)

    def verify(self) -> None:
        if self.skip_tests:
            return
        datum = self.verify_object("GeodeticDatum")
        self.verify_identification(datum, "GeodeticDatum")
        self.verify_dependency(self.ellipsoid_test, datum.ellipsoid)
        self.verify_dependency(self.prime_meridian_test, datum.prime_meridian)
        verify_anchor_point(datum, self.properties.get(ANCHOR_POINT_KEY), "GeodeticDatum")

    @gigs_case("GIGS geodetic datum A")
    def gigs_66001(self):
        self.set_code_and_name(66001, "GIGS geodetic datum A")
        self.create_ellipsoid(UserEllipsoidTest.gigs_67030)
        self.create_prime_meridian(UserPrimeMeridianTest.gigs_68901)
        self.verify()

    @gigs_case("GIGS geodetic datum AA")
    def gigs_66326(self):
        self.set_code_and_name(66326, "GIGS geodetic datum AA")
        self.create_epsg_components(7030, 8901)
        self.verify()

    @gigs_case("GIGS geodetic datum B")
    def gigs_66002(self):
        self.set_code_and_name(66002, "GIGS geodetic datum B")
        self.create_ellipsoid(UserEllipsoidTest.gigs_67001)
        self.create_prime_meridian(UserPrimeMeridianTest.gigs_68901)
        self.verify()

    @gigs_case("GIGS geodetic datum C")
    def gigs_66003(self):
        self.set_code_and_name(66003, "GIGS geodetic datum C")
        self.create_ellipsoid(UserEllipsoidTest.gigs_67004)
        self.create_prime_meridian(UserPrimeMeridianTest.gigs_68901)
        self.verify()

    @gigs_case("GIGS geodetic datum CC")
    def gigs_66289(self):
        self.set_code_and_name(66289, "GIGS geodetic datum CC")
        self.create_epsg_components(7004, 8901)
        self.verify()

    @gigs_case("GIGS geodetic datum E")
    def gigs_66005(self):
        self.set_code_and_name(66005, "GIGS geodetic datum E")
        self.create_ellipsoid(UserEllipsoidTest.gigs_67022)
        self.create_prime_meridian(UserPrimeMeridianTest.gigs_68901)
        self.verify()

    @gigs_case("GIGS geodetic datum F")
    def gigs_66006(self):
        self.set_code_and_name(66006, "GIGS geodetic datum F")
        self.set_origin("Origin F")
        self.create_ellipsoid(UserEllipsoidTest.gigs_67019)
        self.create_prime_meridian(UserPrimeMeridianTest.gigs_68901)
        self.verify()


class UserVerticalDatumTest(UserObjectTest):
    series = 3209
    type_name = "VerticalDatum"
    factory_roles = (ConfigurationKey.DATUM_FACTORY,)

    def __init__(
        self,
        datum_factory: Optional[DatumFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.datum_factory = datum_factory

    def create_object(self) -> Any:
        return require_factory(self.datum_factory, "datum factory").create_vertical_datum(self.properties)

    def verify(self) -> None:
        if self.skip_tests:
            return
        datum = self.verify_object("VerticalDatum")
        self.verify_identification(datum, "VerticalDatum")
        verify_anchor_point(datum, self.properties.get(ANCHOR_POINT_KEY), "VerticalDatum")

    def _expect(self, code: int, letter: str) -> None:
        self.set_code_and_name(code, f"GIGS vertical datum {letter}")
        self.properties[ANCHOR_POINT_KEY] = f"Origin {letter}"

    @gigs_case("GIGS vertical datum U")
    def gigs_66601(self):
        self._expect(66601, "U")
        self.verify()

    @gigs_case("GIGS vertical datum V")
    def gigs_66602(self):
        self._expect(66602, "V")
        self.verify()

    @gigs_case("GIGS vertical datum W")
    def gigs_66603(self):
        self._expect(66603, "W")
        self.verify()


__all__ = [
    "UserGeodeticDatumTest",
    "UserVerticalDatumTest",
]
