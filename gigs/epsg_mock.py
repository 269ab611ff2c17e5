"""
Synthetic reference factory.

Rebuilds a few EPSG coordinate systems, ellipsoids, prime meridians and
geodetic datums from literal tables, through the constructive factories of the
implementation under test. Every object is checked against its table entry
before being returned, so a later failure in a user-defined test points at the
factory under test rather than at a bad reference object.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .asserts import assert_length
from .parameters import ParameterGroup, SimpleParameter
from .referencing import AxisDirection, CSFactory, DatumFactory, NoSuchAuthorityCodeError, properties
from .structure import verify_axis, verify_ellipsoid, verify_prime_meridian
from .units import Unit, Units
from .validators import Validators

logger = logging.getLogger(__name__)

SEMI_MAJOR_AXIS = "Semi-major axis"
INVERSE_FLATTENING = "Inverse flattening"
GREENWICH_LONGITUDE = "Greenwich longitude"

ELLIPSOIDAL = "ellipsoidal"
CARTESIAN = "cartesian"
VERTICAL = "vertical"


@dataclass(frozen=True)
class AxisDefinition:
    name: str
    abbreviation: str
    direction: AxisDirection
    unit: Unit


@dataclass(frozen=True)
class CSDefinition:
    name: str
    kind: str
    axes: Tuple[AxisDefinition, ...]


@dataclass(frozen=True)
class DatumDefinition:
    name: str
    ellipsoid: int
    prime_meridian: int


def _axis(name: str, abbreviation: str, direction: AxisDirection, unit: Unit) -> AxisDefinition:
    return AxisDefinition(name, abbreviation, direction, unit)


_LATITUDE = _axis("Geodetic latitude", "Lat", AxisDirection.NORTH, Units.DEGREE)
_LONGITUDE = _axis("Geodetic longitude", "Lon", AxisDirection.EAST, Units.DEGREE)
_EASTING = _axis("Easting", "E", AxisDirection.EAST, Units.METRE)
_NORTHING = _axis("Northing", "N", AxisDirection.NORTH, Units.METRE)

COORDINATE_SYSTEMS: Dict[int, CSDefinition] = {
    6422: CSDefinition("Ellipsoidal 2D CS. Axes: latitude, longitude. Orientations: north, east. UoM: degree",
                       ELLIPSOIDAL, (_LATITUDE, _LONGITUDE)),
    6423: CSDefinition("Ellipsoidal 3D CS. Axes: latitude, longitude, ellipsoidal height. "
                       "Orientations: north, east, up. UoM: degree, degree, metre.",
                       ELLIPSOIDAL, (_LATITUDE, _LONGITUDE,
                                     _axis("Ellipsoidal height", "h", AxisDirection.UP, Units.METRE))),
    6424: CSDefinition("Ellipsoidal 2D CS. Axes: longitude, latitude. Orientations: east, north. UoM: degree",
                       ELLIPSOIDAL, (_LONGITUDE, _LATITUDE)),
    6403: CSDefinition("Ellipsoidal 2D CS. Axes: latitude, longitude. Orientations: north, east. UoM: grad",
                       ELLIPSOIDAL, (_axis("Geodetic latitude", "Lat", AxisDirection.NORTH, Units.GRAD),
                                     _axis("Geodetic longitude", "Lon", AxisDirection.EAST, Units.GRAD))),
    6500: CSDefinition("Cartesian 3D CS (geocentric). Axes: geocentric X,Y,Z. UoM: m.",
                       CARTESIAN, (_axis("Geocentric X", "X", AxisDirection.GEOCENTRIC_X, Units.METRE),
                                   _axis("Geocentric Y", "Y", AxisDirection.GEOCENTRIC_Y, Units.METRE),
                                   _axis("Geocentric Z", "Z", AxisDirection.GEOCENTRIC_Z, Units.METRE))),
    4400: CSDefinition("Cartesian 2D CS. Axes: easting, northing (E,N). Orientations: east, north. UoM: m.",
                       CARTESIAN, (_EASTING, _NORTHING)),
    4499: CSDefinition("Cartesian 2D CS. Axes: easting, northing (X,Y). Orientations: east, north. UoM: m.",
                       CARTESIAN, (_axis("Easting", "X", AxisDirection.EAST, Units.METRE),
                                   _axis("Northing", "Y", AxisDirection.NORTH, Units.METRE))),
    4530: CSDefinition("Cartesian 2D CS. Axes: northing, easting (X,Y). Orientations: north, east. UoM: m.",
                       CARTESIAN, (_axis("Northing", "X", AxisDirection.NORTH, Units.METRE),
                                   _axis("Easting", "Y", AxisDirection.EAST, Units.METRE))),
    6495: CSDefinition("Vertical CS. Axis: depth (D). Orientation: down. UoM: ft.",
                       VERTICAL, (_axis("Gravity-related depth", "D", AxisDirection.DOWN, Units.FOOT),)),
    6497: CSDefinition("Vertical CS. Axis: height (H). Orientation: up. UoM: ftUS.",
                       VERTICAL, (_axis("Gravity-related height", "H", AxisDirection.UP, Units.US_SURVEY_FOOT),)),
    6498: CSDefinition("Vertical CS. Axis: depth (D). Orientation: down. UoM: m.",
                       VERTICAL, (_axis("Gravity-related depth", "D", AxisDirection.DOWN, Units.METRE),)),
    6499: CSDefinition("Vertical CS. Axis: height (H). Orientation: up. UoM: m.",
                       VERTICAL, (_axis("Gravity-related height", "H", AxisDirection.UP, Units.METRE),)),
    1030: CSDefinition("Vertical CS. Axis: height (H). Orientation: up. UoM: ft.",
                       VERTICAL, (_axis("Gravity-related height", "H", AxisDirection.UP, Units.FOOT),)),
}


def _flattened_sphere(name: str, semi_major_axis: float, inverse_flattening: float) -> ParameterGroup:
    return ParameterGroup(name, (
        SimpleParameter.of_measure(SEMI_MAJOR_AXIS, semi_major_axis, Units.METRE),
        SimpleParameter.of_measure(INVERSE_FLATTENING, inverse_flattening, Units.UNITY),
    ))


ELLIPSOIDS: Dict[int, ParameterGroup] = {
    7030: _flattened_sphere("WGS 84", 6378137.0, 298.257223563),
    7019: _flattened_sphere("GRS 1980", 6378137.0, 298.257222101),
    7004: _flattened_sphere("Bessel 1841", 6377397.155, 299.1528128),
    7022: _flattened_sphere("International 1924", 6378388.0, 297.0),
}

PRIME_MERIDIANS: Dict[int, ParameterGroup] = {
    8901: ParameterGroup("Greenwich", (SimpleParameter.of_measure(GREENWICH_LONGITUDE, 0.0, Units.DEGREE),)),
    8903: ParameterGroup("Paris", (SimpleParameter.of_measure(GREENWICH_LONGITUDE, 2.5969213, Units.GRAD),)),
}

GEODETIC_DATUMS: Dict[int, DatumDefinition] = {
    6326: DatumDefinition("World Geodetic System 1984", 7030, 8901),
    6258: DatumDefinition("European Terrestrial Reference System 1989", 7019, 8901),
    6230: DatumDefinition("European Datum 1950", 7022, 8901),
}


def _definition(table: Dict[int, Any], code: Any, type_name: str) -> Any:
    try:
        return table[int(code)]
    except (KeyError, ValueError):
        raise NoSuchAuthorityCodeError(
            f"No synthetic {type_name} for code {code}.", code=str(code)
        ) from None


class SyntheticReferenceFactory:
    """
    Pseudo EPSG factory building reference objects through the factories under test.

    Usage:
        epsg = SyntheticReferenceFactory(datum_factory, cs_factory)
        cs = epsg.create_vertical_cs(6498)
    """

    def __init__(
        self,
        datum_factory: Optional[DatumFactory],
        cs_factory: Optional[CSFactory],
        validators: Optional[Validators] = None,
    ):
        self.datum_factory = datum_factory
        self.cs_factory = cs_factory
        self.validators = validators or Validators()

    # -------------------------------------------------------------------------
    # Coordinate systems
    # -------------------------------------------------------------------------

    def create_coordinate_system_axis(self, name: str, abbreviation: str,
                                      direction: AxisDirection, unit: Unit) -> Any:
        return self.cs_factory.create_coordinate_system_axis(properties(None, name), abbreviation, direction, unit)

    def create_ellipsoidal_cs(self, code: Any) -> Any:
        return self._create_cs(code, ELLIPSOIDAL)

    def create_cartesian_cs(self, code: Any) -> Any:
        return self._create_cs(code, CARTESIAN)

    def create_vertical_cs(self, code: Any) -> Any:
        return self._create_cs(code, VERTICAL)

    def _create_cs(self, code: Any, kind: str) -> Any:
        definition: CSDefinition = _definition(COORDINATE_SYSTEMS, code, f"{kind} coordinate system")
        if definition.kind != kind:
            raise NoSuchAuthorityCodeError(
                f"EPSG:{code} is a {definition.kind} coordinate system, not a {kind} one.", code=str(code)
            )
        axes = [
            self.create_coordinate_system_axis(a.name, a.abbreviation, a.direction, a.unit)
            for a in definition.axes
        ]
        props = properties(int(code), definition.name)
        if kind == ELLIPSOIDAL:
            cs = self.cs_factory.create_ellipsoidal_cs(props, *axes)
        elif kind == CARTESIAN:
            cs = self.cs_factory.create_cartesian_cs(props, *axes)
        else:
            cs = self.cs_factory.create_vertical_cs(props, axes[0])

        path = f"EPSG:{code}"
        self.validators.validate(cs, path)
        assert_length(len(definition.axes), list(cs.axes), f"{path}.axes")
        for i, (axis, expected) in enumerate(zip(cs.axes, definition.axes)):
            verify_axis(axis, expected.name, expected.abbreviation, expected.direction, expected.unit,
                        f"{path}.axes[{i}]")
        logger.debug("Created synthetic %s coordinate system EPSG:%s", kind, code)
        return cs

    # -------------------------------------------------------------------------
    # Datum components
    # -------------------------------------------------------------------------

    def ellipsoid_definition(self, code: Any) -> ParameterGroup:
        return _definition(ELLIPSOIDS, code, "ellipsoid")

    def prime_meridian_definition(self, code: Any) -> ParameterGroup:
        return _definition(PRIME_MERIDIANS, code, "prime meridian")

    def create_ellipsoid(self, code: Any) -> Any:
        definition = self.ellipsoid_definition(code)
        a = definition.parameter(SEMI_MAJOR_AXIS)
        ivf = definition.parameter(INVERSE_FLATTENING).double_value()
        ellipsoid = self.datum_factory.create_flattened_sphere(
            properties(int(code), definition.name), a.double_value(), ivf, a.unit
        )
        path = f"EPSG:{code}"
        self.validators.validate(ellipsoid, path)
        verify_ellipsoid(ellipsoid, a.double_value(), a.unit, path, inverse_flattening=ivf)
        logger.debug("Created synthetic ellipsoid EPSG:%s", code)
        return ellipsoid

    def create_prime_meridian(self, code: Any) -> Any:
        definition = self.prime_meridian_definition(code)
        longitude = definition.parameter(GREENWICH_LONGITUDE)
        pm = self.datum_factory.create_prime_meridian(
            properties(int(code), definition.name), longitude.double_value(), longitude.unit
        )
        path = f"EPSG:{code}"
        self.validators.validate(pm, path)
        verify_prime_meridian(pm, longitude.double_value(), longitude.unit, path)
        logger.debug("Created synthetic prime meridian EPSG:%s", code)
        return pm

    def create_geodetic_datum(self, code: Any) -> Any:
        definition: DatumDefinition = _definition(GEODETIC_DATUMS, code, "geodetic datum")
        datum = self.datum_factory.create_geodetic_datum(
            properties(int(code), definition.name),
            self.create_ellipsoid(definition.ellipsoid),
            self.create_prime_meridian(definition.prime_meridian),
        )
        self.validators.validate(datum, f"EPSG:{code}")
        logger.debug("Created synthetic geodetic datum EPSG:%s", code)
        return datum


__all__ = [
    "AxisDefinition",
    "CSDefinition",
    "DatumDefinition",
    "COORDINATE_SYSTEMS",
    "ELLIPSOIDS",
    "PRIME_MERIDIANS",
    "GEODETIC_DATUMS",
    "SyntheticReferenceFactory",
]
