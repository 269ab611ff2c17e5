"""
User-defined geodetic (GIGS 3205) and vertical (GIGS 3210) coordinate
reference systems.

Coordinate systems are rebuilt from EPSG codes by the synthetic reference
factory through the CS factory under test; the datum is built by a case of the
user-defined datum test, which then verifies the datum embedded in the CRS.
"""
from typing import Any, Callable, Optional, Sequence

from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..epsg_mock import SyntheticReferenceFactory
from ..lookup import require_factory
from ..referencing import AxisDirection, CRSFactory, CSFactory, DatumFactory
from ..structure import GEOCENTRIC, GEOGRAPHIC_2D, GEOGRAPHIC_3D, GEOGRAPHIC_XY, verify_axis, verify_coordinate_system
from ..units import Unit, Units
from ..validators import Validators
from .base import UserObjectTest
from .datum import UserGeodeticDatumTest, UserVerticalDatumTest


class UserGeodeticCRSTest(UserObjectTest):
    """
    Attributes:
        cs_code: EPSG code of the coordinate system given to the CRS factory
        is_geocentric: Whether a geocentric CRS is built instead of a geographic one
    """

    series = 3205
    type_name = "GeodeticCRS"
    factory_roles = (
        ConfigurationKey.CRS_FACTORY,
        ConfigurationKey.CS_FACTORY,
        ConfigurationKey.DATUM_FACTORY,
    )

    def __init__(
        self,
        crs_factory: Optional[CRSFactory],
        cs_factory: Optional[CSFactory],
        datum_factory: Optional[DatumFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.crs_factory = crs_factory
        self.cs_factory = cs_factory
        self.datum_factory = datum_factory
        self.epsg = SyntheticReferenceFactory(datum_factory, cs_factory, self.validators)
        self.cs_code = 0
        self.is_geocentric = False
        self.datum: Any = None
        self.datum_test: Optional[UserGeodeticDatumTest] = None

    def create_datum(self, case: Callable[[UserGeodeticDatumTest], None]) -> None:
        self.datum_test = self.build_with(
            UserGeodeticDatumTest(self.datum_factory, self.overrides, self.validators), case)
        self.datum = self.datum_test.get_identified_object()

    def create_object(self) -> Any:
        factory = require_factory(self.crs_factory, "CRS factory")
        require_factory(self.cs_factory, "CS factory")
        if self.is_geocentric:
            return factory.create_geocentric_crs(self.properties, self.datum, self.epsg.create_cartesian_cs(self.cs_code))
        return factory.create_geographic_crs(self.properties, self.datum, self.epsg.create_ellipsoidal_cs(self.cs_code))

    def expected_axes(self):
        """Return the expected axis directions and units of the coordinate system."""
        if self.is_geocentric:
            return GEOCENTRIC, (Units.METRE,)
        if self.cs_code == 6403:
            return GEOGRAPHIC_2D, (Units.GRAD,)
        if self.cs_code == 6423:
            return GEOGRAPHIC_3D, (Units.DEGREE, Units.DEGREE, Units.METRE)
        if self.cs_code == 6424:
            return GEOGRAPHIC_XY, (Units.DEGREE,)
        return GEOGRAPHIC_2D, (Units.DEGREE,)

    def verify(self) -> None:
        if self.skip_tests:
            return
        crs = self.verify_object("GeodeticCRS")
        self.verify_identification(crs, "GeodeticCRS")
        self.verify_dependency(self.datum_test, crs.datum)
        directions, units = self.expected_axes()
        verify_coordinate_system(crs.coordinate_system, directions, units, "GeodeticCRS.coordinate_system")

    def _expect(self, code: int, name: str, datum_case: Callable[[UserGeodeticDatumTest], None],
                cs_code: int) -> None:
        self.set_code_and_name(code, name)
        self.create_datum(datum_case)
        self.cs_code = cs_code

    @gigs_case("GIGS geocenCRS A")
    def gigs_64001(self):
        self.is_geocentric = True
        self._expect(64001, "GIGS geocenCRS A", UserGeodeticDatumTest.gigs_66001, 6500)
        self.verify()

    @gigs_case("GIGS geog3DCRS A")
    def gigs_64002(self):
        self._expect(64002, "GIGS geog3DCRS A", UserGeodeticDatumTest.gigs_66001, 6423)
        self.verify()

    @gigs_case("GIGS geogCRS A")
    def gigs_64003(self):
        self._expect(64003, "GIGS geogCRS A", UserGeodeticDatumTest.gigs_66001, 6422)
        self.verify()

    @gigs_case("GIGS geogCRS B")
    def gigs_64005(self):
        self._expect(64005, "GIGS geogCRS B", UserGeodeticDatumTest.gigs_66002, 6422)
        self.verify()

    @gigs_case("GIGS geogCRS F")
    def gigs_64009(self):
        self._expect(64009, "GIGS geogCRS F", UserGeodeticDatumTest.gigs_66006, 6422)
        self.verify()


class UserVerticalCRSTest(UserObjectTest):
    series = 3210
    type_name = "VerticalCRS"
    factory_roles = (
        ConfigurationKey.CRS_FACTORY,
        ConfigurationKey.CS_FACTORY,
        ConfigurationKey.DATUM_FACTORY,
    )

    def __init__(
        self,
        crs_factory: Optional[CRSFactory],
        cs_factory: Optional[CSFactory],
        datum_factory: Optional[DatumFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.crs_factory = crs_factory
        self.cs_factory = cs_factory
        self.datum_factory = datum_factory
        self.epsg = SyntheticReferenceFactory(datum_factory, cs_factory, self.validators)
        self.vertical_cs: Any = None
        self.datum: Any = None
        self.datum_test: Optional[UserVerticalDatumTest] = None

    def create_datum(self, case: Callable[[UserVerticalDatumTest], None]) -> None:
        self.datum_test = self.build_with(UserVerticalDatumTest(self.datum_factory, self.overrides, self.validators),
                                          case)
        self.datum = self.datum_test.get_identified_object()

    def create_vertical_cs(self, code: int, name: str, abbreviation: str,
                           direction: AxisDirection, unit: Unit) -> None:
        """Build the EPSG coordinate system and check that its axis is the expected one."""
        require_factory(self.cs_factory, "CS factory")
        self.vertical_cs = self.epsg.create_vertical_cs(code)
        verify_axis(self.vertical_cs.axes[0], name, abbreviation, direction, unit, "VerticalCS.axes[0]")

    def create_object(self) -> Any:
        factory = require_factory(self.crs_factory, "CRS factory")
        return factory.create_vertical_crs(self.properties, self.datum, self.vertical_cs)

    def verify(self) -> None:
        if self.skip_tests:
            return
        crs = self.verify_object("VerticalCRS")
        self.verify_identification(crs, "VerticalCRS")
        self.verify_dependency(self.datum_test, crs.datum)

    def _expect(self, code: int, name: str, cs_code: int, axis: Sequence[Any],
                datum_case: Callable[[UserVerticalDatumTest], None] = UserVerticalDatumTest.gigs_66601) -> None:
        self.set_code_and_name(code, name)
        self.create_datum(datum_case)
        self.create_vertical_cs(cs_code, *axis)

    @gigs_case("GIGS vertCRS U1 depth")
    def gigs_64502(self):
        self._expect(64502, "GIGS vertCRS U1 depth", 6498,
                     ("Gravity-related depth", "D", AxisDirection.DOWN, Units.METRE))
        self.verify()

    @gigs_case("GIGS vertCRS U1 height")
    def gigs_64501(self):
        self._expect(64501, "GIGS vertCRS U1 height", 6499,
                     ("Gravity-related height", "H", AxisDirection.UP, Units.METRE))
        self.verify()

    @gigs_case("GIGS vertCRS U2 depth")
    def gigs_64504(self):
        self._expect(64504, "GIGS vertCRS U2 depth", 6495,
                     ("Gravity-related depth", "D", AxisDirection.DOWN, Units.FOOT))
        self.verify()

    @gigs_case("GIGS vertCRS U2 height")
    def gigs_64503(self):
        self._expect(64503, "GIGS vertCRS U2 height", 1030,
                     ("Gravity-related height", "H", AxisDirection.UP, Units.FOOT))
        self.verify()

    @gigs_case("GIGS vertCRS V2 height")
    def gigs_64509(self):
        self._expect(64509, "GIGS vertCRS V2 height", 6497,
                     ("Gravity-related height", "H", AxisDirection.UP, Units.US_SURVEY_FOOT),
                     UserVerticalDatumTest.gigs_66602)
        self.verify()


__all__ = [
    "UserGeodeticCRSTest",
    "UserVerticalCRSTest",
]
