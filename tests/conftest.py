"""
In-memory reference implementation of the factory interfaces.

The constructive factory echoes every value it receives; the authority factory
serves a handful of EPSG objects built through it and counts its calls.
"""
import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import pytest

from gigs.configuration import ConfigurationOverrides
from gigs.parameters import ParameterGroup, SimpleParameter
from gigs.referencing import (
    ALIAS_KEY,
    ANCHOR_POINT_KEY,
    IDENTIFIERS_KEY,
    NAME_KEY,
    AxisDirection,
    NoSuchAuthorityCodeError,
    properties,
)
from gigs.units import Unit, Units


@dataclass
class Obj:
    name: str
    identifiers: Sequence[Any] = ()
    aliases: Sequence[str] = ()


@dataclass
class Ellipsoid(Obj):
    semi_major_axis: float = 0.0
    semi_minor_axis: float = 0.0
    inverse_flattening: float = math.inf
    is_ivf_definitive: bool = False
    is_sphere: bool = False
    axis_unit: Unit = Units.METRE


@dataclass
class PrimeMeridian(Obj):
    greenwich_longitude: float = 0.0
    angular_unit: Unit = Units.DEGREE


@dataclass
class GeodeticDatum(Obj):
    ellipsoid: Any = None
    prime_meridian: Any = None
    anchor_point: Optional[str] = None


@dataclass
class VerticalDatum(Obj):
    anchor_point: Optional[str] = None


@dataclass
class Axis(Obj):
    abbreviation: str = ""
    direction: Optional[AxisDirection] = None
    unit: Optional[Unit] = None


@dataclass
class CoordinateSystem(Obj):
    axes: Sequence[Axis] = ()


@dataclass
class CRS(Obj):
    datum: Any = None
    coordinate_system: Any = None
    base_crs: Any = None


@dataclass
class Operation(Obj):
    method: Any = None
    operation_version: Optional[str] = None
    parameters: ParameterGroup = field(default_factory=lambda: ParameterGroup(""))


def _identified(props: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": props[NAME_KEY],
        "identifiers": tuple(props.get(IDENTIFIERS_KEY, ())),
        "aliases": tuple(props.get(ALIAS_KEY, ())),
    }


class ReferenceFactory:
    """Datum, CS and CRS constructive factory keeping every user value."""

    def create_ellipsoid(self, props, semi_major_axis, semi_minor_axis, unit):
        is_sphere = semi_major_axis == semi_minor_axis
        ivf = math.inf if is_sphere else semi_major_axis / (semi_major_axis - semi_minor_axis)
        return Ellipsoid(**_identified(props), semi_major_axis=semi_major_axis, semi_minor_axis=semi_minor_axis,
                         inverse_flattening=ivf, is_sphere=is_sphere, axis_unit=unit)

    def create_flattened_sphere(self, props, semi_major_axis, inverse_flattening, unit):
        return Ellipsoid(**_identified(props), semi_major_axis=semi_major_axis,
                         semi_minor_axis=semi_major_axis * (1 - 1 / inverse_flattening),
                         inverse_flattening=inverse_flattening, is_ivf_definitive=True, axis_unit=unit)

    def create_prime_meridian(self, props, longitude, unit):
        return PrimeMeridian(**_identified(props), greenwich_longitude=longitude, angular_unit=unit)

    def create_geodetic_datum(self, props, ellipsoid, prime_meridian):
        return GeodeticDatum(**_identified(props), ellipsoid=ellipsoid, prime_meridian=prime_meridian,
                             anchor_point=props.get(ANCHOR_POINT_KEY))

    def create_vertical_datum(self, props):
        return VerticalDatum(**_identified(props), anchor_point=props.get(ANCHOR_POINT_KEY))

    def create_coordinate_system_axis(self, props, abbreviation, direction, unit):
        return Axis(**_identified(props), abbreviation=abbreviation, direction=direction, unit=unit)

    def create_ellipsoidal_cs(self, props, *axes):
        return CoordinateSystem(**_identified(props), axes=tuple(axes))

    def create_cartesian_cs(self, props, *axes):
        return CoordinateSystem(**_identified(props), axes=tuple(axes))

    def create_vertical_cs(self, props, axis):
        return CoordinateSystem(**_identified(props), axes=(axis,))

    def create_geographic_crs(self, props, datum, cs):
        return CRS(**_identified(props), datum=datum, coordinate_system=cs)

    def create_geocentric_crs(self, props, datum, cs):
        return CRS(**_identified(props), datum=datum, coordinate_system=cs)

    def create_vertical_crs(self, props, datum, cs):
        return CRS(**_identified(props), datum=datum, coordinate_system=cs)


def _props(code: int, name: str, *aliases: str) -> Dict[str, Any]:
    return properties(code, name, **{ALIAS_KEY: aliases})


def _axes(factory: ReferenceFactory, *specs: Tuple[str, str, AxisDirection, Unit]) -> Tuple[Axis, ...]:
    return tuple(factory.create_coordinate_system_axis({NAME_KEY: n}, a, d, u) for n, a, d, u in specs)


def _utm_conversion(zone: int) -> Operation:
    return Operation(**_identified(_props(16000 + zone, f"UTM zone {zone}N")),
                     method=Obj("Transverse Mercator"),
                     parameters=ParameterGroup("Transverse Mercator", (
                         SimpleParameter.of_measure("Latitude of natural origin", 0.0, Units.DEGREE),
                         SimpleParameter.of_measure("Longitude of natural origin", zone * 6 - 183.0, Units.DEGREE),
                         SimpleParameter.of_measure("Scale factor at natural origin", 0.9996, Units.UNITY),
                         SimpleParameter.of_measure("False easting", 500000.0, Units.METRE),
                         SimpleParameter.of_measure("False northing", 0.0, Units.METRE),
                     )))


LAT = ("Geodetic latitude", "Lat", AxisDirection.NORTH, Units.DEGREE)
LON = ("Geodetic longitude", "Lon", AxisDirection.EAST, Units.DEGREE)
EASTING = ("Easting", "E", AxisDirection.EAST, Units.METRE)
NORTHING = ("Northing", "N", AxisDirection.NORTH, Units.METRE)


class ReferenceAuthorityFactory:
    """
    EPSG authority factory over a small registry.

    Attributes:
        calls: (method, code) of every call, in order
        objects: Registry keyed by (method, code); tests may replace entries
    """

    def __init__(self, factory: ReferenceFactory):
        self.calls: List[Tuple[str, str]] = []
        self.objects: Dict[Tuple[str, str], Any] = {}
        f = factory

        wgs84 = f.create_flattened_sphere(_props(7030, "WGS 84", "WGS84"), 6378137.0, 298.257223563, Units.METRE)
        grs80 = f.create_flattened_sphere(_props(7019, "GRS 1980", "International 1979"),
                                          6378137.0, 298.257222101, Units.METRE)
        greenwich = f.create_prime_meridian(_props(8901, "Greenwich"), 0.0, Units.DEGREE)
        paris = f.create_prime_meridian(_props(8903, "Paris"), 2.5969213, Units.GRAD)
        datum = f.create_geodetic_datum(_props(6326, "World Geodetic System 1984", "WGS 84"), wgs84, greenwich)
        odn = f.create_vertical_datum(_props(5101, "Ordnance Datum Newlyn", "ODN", "Newlyn"))

        lat_lon = f.create_ellipsoidal_cs(_props(6422, "Ellipsoidal 2D CS"), *_axes(f, LAT, LON))
        geographic = f.create_geographic_crs(_props(4326, "WGS 84"), datum, lat_lon)
        geocentric = f.create_geocentric_crs(_props(4978, "WGS 84"), datum, f.create_cartesian_cs(
            _props(6500, "Cartesian 3D CS (geocentric)"), *_axes(
                f,
                ("Geocentric X", "X", AxisDirection.GEOCENTRIC_X, Units.METRE),
                ("Geocentric Y", "Y", AxisDirection.GEOCENTRIC_Y, Units.METRE),
                ("Geocentric Z", "Z", AxisDirection.GEOCENTRIC_Z, Units.METRE),
            )))
        projected_cs = f.create_cartesian_cs(_props(4400, "Cartesian 2D CS"), *_axes(f, EASTING, NORTHING))
        utm = CRS(**_identified(_props(32631, "WGS 84 / UTM zone 31N")), datum=datum, base_crs=geographic,
                  coordinate_system=projected_cs)
        ans = f.create_flattened_sphere(_props(7003, "Australian National Spheroid"), 6378160.0, 298.25, Units.METRE)
        agd66 = f.create_geodetic_datum(_props(6202, "Australian Geodetic Datum 1966"), ans, greenwich)
        agd66_geographic = f.create_geographic_crs(_props(4202, "AGD66"), agd66, lat_lon)
        amg = [CRS(**_identified(_props(20200 + zone, f"AGD66 / AMG zone {zone}")), datum=agd66,
                   base_crs=agd66_geographic, coordinate_system=projected_cs) for zone in range(49, 57)]
        height = f.create_vertical_crs(_props(5701, "ODN height", "PDO Height Datum 1993 height"), odn,
                                       f.create_vertical_cs(_props(6499, "Vertical CS"), *_axes(
                                           f, ("Gravity-related height", "H", AxisDirection.UP, Units.METRE))))

        transformation = Operation(**_identified(_props(1803, "AGD66 to GDA94 (11)", "AGD66 to GDA94 [GA v2]")),
                                   method=Obj("NTv2"), operation_version="ICSM-Aus 0.1m")

        for method, obj in [
            ("create_ellipsoid", wgs84),
            ("create_ellipsoid", grs80),
            ("create_prime_meridian", greenwich),
            ("create_prime_meridian", paris),
            ("create_geodetic_datum", datum),
            ("create_vertical_datum", odn),
            ("create_geographic_crs", geographic),
            ("create_geocentric_crs", geocentric),
            ("create_projected_crs", utm),
            *[("create_projected_crs", crs) for crs in amg],
            ("create_vertical_crs", height),
            *[("create_coordinate_operation", _utm_conversion(zone)) for zone in range(29, 34)],
            ("create_coordinate_operation", transformation),
        ]:
            self.objects[(method, obj.identifiers[0].code)] = obj

    def _get(self, method: str, code: str) -> Any:
        self.calls.append((method, code))
        try:
            return self.objects[(method, code)]
        except KeyError:
            raise NoSuchAuthorityCodeError(f"No object for EPSG:{code}.", code=code) from None

    def replace(self, method: str, code: int, **changes: Any) -> None:
        """Replace fields of a registered object."""
        key = (method, str(code))
        self.objects[key] = replace(self.objects[key], **changes)

    def __getattr__(self, method: str) -> Callable[[str], Any]:
        if method.startswith("create_"):
            return lambda code: self._get(method, code)
        raise AttributeError(method)


@pytest.fixture()
def overrides():
    """Empty overrides, ignoring any GIGS_CONFIG variable of the environment."""
    return ConfigurationOverrides()


@pytest.fixture()
def factory():
    return ReferenceFactory()


@pytest.fixture()
def authority(factory):
    return ReferenceAuthorityFactory(factory)
