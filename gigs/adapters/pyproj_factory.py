"""
Authority factories backed by pyproj.

Wraps the objects pyproj builds from its bundled EPSG database into the shapes
the conformance tests read (``name``, ``identifiers``, ``coordinate_system.axes``,
...). pyproj does not expose EPSG aliases, so wrapped objects report none;
disable ``isStandardAliasSupported`` when running the suite against it.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from pyproj import CRS
from pyproj.crs import CoordinateOperation, Datum, Ellipsoid, PrimeMeridian
from pyproj.exceptions import CRSError

from ..parameters import ParameterGroup, SimpleParameter
from ..referencing import EPSG, AxisDirection, Identifier, NoSuchAuthorityCodeError
from ..units import Unit, Units

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _identifiers(obj: Any) -> List[Identifier]:
    """Identifiers of a pyproj object, read from its PROJJSON form."""
    data: Dict[str, Any] = obj.to_json_dict()
    ids = data.get("ids") or ([data["id"]] if "id" in data else [])
    return [Identifier(str(i["code"]), i.get("authority", EPSG), i.get("version")) for i in ids]


def _unit(name: Optional[str]) -> Optional[Unit]:
    if not name:
        return None
    return Units.by_name(name)


@dataclass
class WrappedObject:
    name: str
    identifiers: Sequence[Identifier] = ()
    aliases: Sequence[str] = ()


@dataclass
class WrappedEllipsoid(WrappedObject):
    semi_major_axis: float = float("nan")
    semi_minor_axis: float = float("nan")
    inverse_flattening: float = math.inf
    is_ivf_definitive: bool = False
    is_sphere: bool = False
    axis_unit: Unit = Units.METRE


@dataclass
class WrappedPrimeMeridian(WrappedObject):
    greenwich_longitude: float = 0.0
    angular_unit: Optional[Unit] = None


@dataclass
class WrappedDatum(WrappedObject):
    ellipsoid: Optional[WrappedEllipsoid] = None
    prime_meridian: Optional[WrappedPrimeMeridian] = None
    anchor_point: Optional[str] = None


@dataclass
class WrappedAxis(WrappedObject):
    abbreviation: str = ""
    direction: Optional[AxisDirection] = None
    unit: Optional[Unit] = None


@dataclass
class WrappedCoordinateSystem(WrappedObject):
    axes: Sequence[WrappedAxis] = ()


@dataclass
class WrappedCRS(WrappedObject):
    datum: Optional[WrappedDatum] = None
    coordinate_system: Optional[WrappedCoordinateSystem] = None
    base_crs: Optional["WrappedCRS"] = None


@dataclass
class WrappedOperation(WrappedObject):
    method: Optional[WrappedObject] = None
    operation_version: Optional[str] = None
    parameters: ParameterGroup = field(default_factory=lambda: ParameterGroup(""))


def wrap_ellipsoid(ellipsoid: Ellipsoid) -> WrappedEllipsoid:
    ivf = ellipsoid.inverse_flattening
    return WrappedEllipsoid(
        name=ellipsoid.name,
        identifiers=_identifiers(ellipsoid),
        semi_major_axis=ellipsoid.semi_major_metre,
        semi_minor_axis=ellipsoid.semi_minor_metre,
        inverse_flattening=ivf if ivf else math.inf,
        is_ivf_definitive=bool(ellipsoid.is_semi_minor_computed),
        is_sphere=ellipsoid.semi_major_metre == ellipsoid.semi_minor_metre,
    )


def wrap_prime_meridian(prime_meridian: PrimeMeridian) -> WrappedPrimeMeridian:
    return WrappedPrimeMeridian(
        name=prime_meridian.name,
        identifiers=_identifiers(prime_meridian),
        greenwich_longitude=prime_meridian.longitude,
        angular_unit=_unit(prime_meridian.unit_name),
    )


def wrap_datum(datum: Datum) -> WrappedDatum:
    ellipsoid = datum.ellipsoid
    prime_meridian = datum.prime_meridian
    return WrappedDatum(
        name=datum.name,
        identifiers=_identifiers(datum),
        ellipsoid=wrap_ellipsoid(ellipsoid) if ellipsoid is not None else None,
        prime_meridian=wrap_prime_meridian(prime_meridian) if prime_meridian is not None else None,
        anchor_point=datum.to_json_dict().get("anchor"),
    )


def wrap_coordinate_system(cs: Any) -> WrappedCoordinateSystem:
    axes = [
        WrappedAxis(
            name=axis.name,
            abbreviation=axis.abbrev,
            direction=AxisDirection.parse(axis.direction),
            unit=_unit(axis.unit_name),
        )
        for axis in cs.axis_list
    ]
    # PROJ coordinate systems are usually unnamed.
    name = cs.name or f"{cs.to_json_dict().get('subtype', 'unknown').capitalize()} {len(axes)}D CS"
    return WrappedCoordinateSystem(name=name, axes=axes)


def wrap_crs(crs: CRS) -> WrappedCRS:
    base_crs = None
    if crs.is_projected and crs.geodetic_crs is not None:
        base_crs = wrap_crs(crs.geodetic_crs)
    return WrappedCRS(
        name=crs.name,
        identifiers=_identifiers(crs),
        datum=wrap_datum(crs.datum) if crs.datum is not None else None,
        coordinate_system=wrap_coordinate_system(crs.coordinate_system),
        base_crs=base_crs,
    )


def wrap_operation(operation: CoordinateOperation) -> WrappedOperation:
    parameters = ParameterGroup(operation.method_name, [
        SimpleParameter.of_measure(p.name, p.value, _unit(p.unit_name))
        if isinstance(p.value, (int, float)) else SimpleParameter.of_string(p.name, str(p.value))
        for p in operation.params
    ])
    return WrappedOperation(
        name=operation.name,
        identifiers=_identifiers(operation),
        method=WrappedObject(operation.method_name),
        operation_version=operation.to_json_dict().get("version"),
        parameters=parameters,
    )


class PyprojAuthorityFactory:
    """
    CRS, datum and coordinate operation authority factory over pyproj's EPSG database.

    Usage:
        factory = PyprojAuthorityFactory()
        suite = TestSuite(factories=Factories(
            crs_authority_factory=factory,
            datum_authority_factory=factory,
            cop_authority_factory=factory,
        ))
    """

    def __init__(self, authority: str = EPSG):
        self.authority = authority

    def _create(self, build: Callable[[], T], code: str, type_name: str) -> T:
        try:
            obj = build()
        except CRSError as e:
            raise NoSuchAuthorityCodeError(
                f"No {type_name} for code {self.authority}:{code}: {e}", self.authority, str(code)
            ) from e
        logger.debug("Created %s %s:%s from pyproj", type_name, self.authority, code)
        return obj

    def _crs(self, code: str, type_name: str, accept: Callable[[CRS], bool]) -> WrappedCRS:
        crs = self._create(lambda: CRS.from_authority(self.authority, str(code)), code, type_name)
        if not accept(crs):
            raise NoSuchAuthorityCodeError(
                f"{self.authority}:{code} is a {crs.type_name}, not a {type_name}.", self.authority, str(code)
            )
        return wrap_crs(crs)

    def create_geographic_crs(self, code: str) -> WrappedCRS:
        return self._crs(code, "geographic CRS", lambda crs: crs.is_geographic)

    def create_geocentric_crs(self, code: str) -> WrappedCRS:
        return self._crs(code, "geocentric CRS", lambda crs: crs.is_geocentric)

    def create_projected_crs(self, code: str) -> WrappedCRS:
        return self._crs(code, "projected CRS", lambda crs: crs.is_projected)

    def create_vertical_crs(self, code: str) -> WrappedCRS:
        return self._crs(code, "vertical CRS", lambda crs: crs.is_vertical)

    def create_ellipsoid(self, code: str) -> WrappedEllipsoid:
        return wrap_ellipsoid(self._create(lambda: Ellipsoid.from_authority(self.authority, code), code, "ellipsoid"))

    def create_prime_meridian(self, code: str) -> WrappedPrimeMeridian:
        return wrap_prime_meridian(
            self._create(lambda: PrimeMeridian.from_authority(self.authority, code), code, "prime meridian"))

    def create_geodetic_datum(self, code: str) -> WrappedDatum:
        return wrap_datum(self._create(lambda: Datum.from_authority(self.authority, code), code, "geodetic datum"))

    def create_vertical_datum(self, code: str) -> WrappedDatum:
        return wrap_datum(self._create(lambda: Datum.from_authority(self.authority, code), code, "vertical datum"))

    def create_coordinate_operation(self, code: str) -> WrappedOperation:
        return wrap_operation(self._create(
            lambda: CoordinateOperation.from_authority(self.authority, code), code, "coordinate operation"))


__all__ = [
    "WrappedObject",
    "WrappedEllipsoid",
    "WrappedPrimeMeridian",
    "WrappedDatum",
    "WrappedAxis",
    "WrappedCoordinateSystem",
    "WrappedCRS",
    "WrappedOperation",
    "PyprojAuthorityFactory",
]
