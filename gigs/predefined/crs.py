"""
Coordinate reference systems created from EPSG codes: geodetic (GIGS 2205),
projected (GIGS 2207) and vertical (GIGS 2210).

The depth of dependency checks differs per kind. A geodetic CRS only checks
its datum code, a projected CRS checks its datum code and base CRS name, and a
vertical CRS verifies its datum through a full vertical datum test.
"""
from typing import Any, Optional, Sequence

from ..asserts import assert_not_none
from ..base import gigs_case
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import require_factory
from ..naming import assert_identifier_equals, assert_name_equals, get_name
from ..referencing import AxisDirection, CRSAuthorityFactory
from ..structure import GEOCENTRIC, GEOGRAPHIC_2D, GEOGRAPHIC_3D, verify_axis_directions
from ..validators import Validators
from .base import PredefinedObjectTest
from .datum import VerticalDatumTest

DEPENDENCY = ConfigurationKey.IS_DEPENDENCY_IDENTIFICATION_SUPPORTED


class _CRSTest(PredefinedObjectTest):
    factory_roles = (ConfigurationKey.CRS_AUTHORITY_FACTORY,)

    def __init__(
        self,
        crs_authority_factory: Optional[CRSAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.crs_authority_factory = crs_authority_factory
        self.datum_code: int = 0

    def _factory(self) -> CRSAuthorityFactory:
        return require_factory(self.crs_authority_factory, "CRS authority factory")

    def verify_datum_code(self, crs: Any, path: str) -> Any:
        datum = assert_not_none(crs.datum, f"{path}.datum")
        if self.is_dependency_identification_supported and self.is_standard_identifier_supported:
            assert_identifier_equals(self.datum_code, datum.identifiers, f"{path}.datum", key=DEPENDENCY)
        return datum


class GeodeticCRSTest(_CRSTest):
    """
    Attributes:
        datum_code: Expected EPSG code of the datum
        directions: Expected axis directions
        is_geocentric: Whether the CRS is requested as a geocentric CRS
    """

    series = 2205
    type_name = "GeodeticCRS"

    def __init__(
        self,
        crs_authority_factory: Optional[CRSAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(crs_authority_factory, overrides, validators)
        self.directions: Sequence[AxisDirection] = GEOGRAPHIC_2D
        self.is_geocentric = False

    def create_object(self, code: str) -> Any:
        if self.is_geocentric:
            return self._factory().create_geocentric_crs(code)
        return self._factory().create_geographic_crs(code)

    def verify(self) -> None:
        crs = self.verify_object("GeodeticCRS")
        self.verify_identification(crs, "GeodeticCRS", exactly_one=False)
        self.verify_datum_code(crs, "GeodeticCRS")
        verify_axis_directions(crs.coordinate_system, self.directions, "GeodeticCRS.coordinate_system")

    def _expect(self, code: int, name: str, datum_code: int, directions: Sequence[AxisDirection]) -> None:
        self.code = code
        self.name = name
        self.datum_code = datum_code
        self.directions = directions

    @gigs_case("ED50")
    def epsg_4230(self):
        self._expect(4230, "ED50", 6230, GEOGRAPHIC_2D)
        self.verify()

    @gigs_case("ETRS89")
    def epsg_4258(self):
        self._expect(4258, "ETRS89", 6258, GEOGRAPHIC_2D)
        self.verify()

    @gigs_case("WGS 84")
    def epsg_4326(self):
        self._expect(4326, "WGS 84", 6326, GEOGRAPHIC_2D)
        self.verify()

    @gigs_case("NTF (Paris)")
    def epsg_4807(self):
        self._expect(4807, "NTF (Paris)", 6807, GEOGRAPHIC_2D)
        self.verify()

    @gigs_case("WGS 84 (geocentric)")
    def epsg_4978(self):
        self._expect(4978, "WGS 84", 6326, GEOCENTRIC)
        self.is_geocentric = True
        self.verify()

    @gigs_case("WGS 84 (geographic 3D)")
    def epsg_4979(self):
        self._expect(4979, "WGS 84", 6326, GEOGRAPHIC_3D)
        self.verify()


class ProjectedCRSTest(_CRSTest):
    """
    Projected CRS names are compared in prefix mode, since one case may cover
    several codes (e.g. 'AGD66 / AMG' for every 'AGD66 / AMG zone NN').

    Attributes:
        geographic_crs: Expected name of the base CRS
        datum_code: Expected EPSG code of the datum
        is_north_axis_first: Whether the northing axis comes first
        is_west_orientated: Whether the easting axis points west
        is_south_orientated: Whether the northing axis points south
    """

    series = 2207
    type_name = "ProjectedCRS"

    def __init__(
        self,
        crs_authority_factory: Optional[CRSAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(crs_authority_factory, overrides, validators)
        self.geographic_crs: Optional[str] = None
        self.is_north_axis_first = False
        self.is_west_orientated = False
        self.is_south_orientated = False

    def create_object(self, code: str) -> Any:
        return self._factory().create_projected_crs(code)

    def expected_directions(self):
        easting = AxisDirection.WEST if self.is_west_orientated else AxisDirection.EAST
        northing = AxisDirection.SOUTH if self.is_south_orientated else AxisDirection.NORTH
        return (northing, easting) if self.is_north_axis_first else (easting, northing)

    def verify(self) -> None:
        crs = self.verify_object("ProjectedCRS")
        self.verify_identification(crs, "ProjectedCRS", full_name=False)
        self.verify_datum_code(crs, "ProjectedCRS")
        if self.is_dependency_identification_supported:
            assert_name_equals(self.geographic_crs, get_name(crs.base_crs), "ProjectedCRS.base_crs.name",
                               key=DEPENDENCY)
        verify_axis_directions(crs.coordinate_system, self.expected_directions(), "ProjectedCRS.coordinate_system")

    def verify_code(self, code: int) -> None:
        """Test one more code with the current expectations."""
        self.reset(code)
        self.verify()

    @gigs_case("Accra / Ghana National Grid")
    def epsg_2136(self):
        self.name = "Accra / Ghana National Grid"
        self.aliases = ("Accra / Gold Coast Grid", "Accra / Ghana Nat. Grid")
        self.geographic_crs = "Accra"
        self.datum_code = 6168
        self.verify_code(2136)

    @gigs_case("NZGD2000 / New Zealand Transverse Mercator 2000")
    def epsg_2193(self):
        self.name = "NZGD2000 / New Zealand Transverse Mercator 2000"
        self.aliases = ("NZGD2000 / NZTM", "NZGD2000 / New Zealand Transverse Mercator", "NZGD2000 / NZTM2000")
        self.geographic_crs = "NZGD2000"
        self.datum_code = 6167
        self.is_north_axis_first = True
        self.verify_code(2193)

    @gigs_case("AGD66 / AMG")
    def various_agd66_amg(self):
        self.name = "AGD66 / AMG"
        self.geographic_crs = "AGD66"
        self.datum_code = 6202
        for code in range(20249, 20257):
            self.verify_code(code)

    @gigs_case("OSGB36 / British National Grid")
    def epsg_27700(self):
        self.name = "OSGB36 / British National Grid"
        self.aliases = ("British National Grid",)
        self.geographic_crs = "OSGB36"
        self.datum_code = 6277
        self.verify_code(27700)

    @gigs_case("WGS 84 / UTM zone 31N")
    def epsg_32631(self):
        self.name = "WGS 84 / UTM zone 31N"
        self.geographic_crs = "WGS 84"
        self.datum_code = 6326
        self.verify_code(32631)


class VerticalCRSTest(_CRSTest):
    """
    Attributes:
        datum_code: Expected EPSG code of the vertical datum
        direction: Expected direction of the single axis
    """

    series = 2210
    type_name = "VerticalCRS"

    def __init__(
        self,
        crs_authority_factory: Optional[CRSAuthorityFactory],
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(crs_authority_factory, overrides, validators)
        self.direction = AxisDirection.UP

    def create_object(self, code: str) -> Any:
        return self._factory().create_vertical_crs(code)

    def verify(self) -> None:
        crs = self.verify_object("VerticalCRS")
        self.verify_identification(crs, "VerticalCRS")
        self.verify_datum_code(crs, "VerticalCRS")
        verify_axis_directions(crs.coordinate_system, (self.direction,), "VerticalCRS.coordinate_system")

    def datum_test(self) -> VerticalDatumTest:
        """Return a test verifying the datum of the CRS under test."""
        test = VerticalDatumTest(None, self.overrides, self.validators)
        test.configure_as_dependency(self)
        test.set_identified_object(self.get_identified_object().datum)
        return test

    @gigs_case("ODN height")
    def epsg_5701(self):
        self.code = 5701
        self.name = "ODN height"
        self.aliases = ("PDO Height Datum 1993 height",)
        self.datum_code = 5101
        self.verify()
        self.datum_test().epsg_5101()

    @gigs_case("NAVD88 height")
    def epsg_5703(self):
        self.code = 5703
        self.name = "NAVD88 height"
        self.datum_code = 5103
        self.verify()
        self.datum_test().epsg_5103()

    @gigs_case("MSL depth")
    def epsg_5715(self):
        self.code = 5715
        self.name = "MSL depth"
        self.aliases = ("mean sea level height",)
        self.datum_code = 5100
        self.direction = AxisDirection.DOWN
        self.verify()
        self.datum_test().epsg_5100()


__all__ = [
    "GeodeticCRSTest",
    "ProjectedCRSTest",
    "VerticalCRSTest",
]
