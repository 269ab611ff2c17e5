"""
Interfaces of the referencing library under test.

The harness never implements these protocols: the system under test supplies
objects and factories that satisfy them. Only the identifier type and the
factory exceptions are concrete, because tests need to build property bags and
implementations need something to raise.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, runtime_checkable

from .units import Unit


EPSG = "EPSG"

# Keys of the property bags given to constructive factories.
NAME_KEY = "name"
IDENTIFIERS_KEY = "identifiers"
ALIAS_KEY = "alias"
ANCHOR_POINT_KEY = "anchorPoint"

Properties = Mapping[str, Any]


class FactoryError(Exception):
    """Raised by a factory that can not create the requested object."""


class NoSuchAuthorityCodeError(FactoryError):
    """Raised by an authority factory for a code it does not know."""

    def __init__(self, message: str, authority: str = EPSG, code: Optional[str] = None):
        super().__init__(message)
        self.authority = authority
        self.code = code


class AxisDirection(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"
    GEOCENTRIC_X = "geocentricX"
    GEOCENTRIC_Y = "geocentricY"
    GEOCENTRIC_Z = "geocentricZ"

    @classmethod
    def parse(cls, value: str) -> "AxisDirection":
        """Return the direction for a name, ignoring case."""
        normalized = value.strip().replace(" ", "").lower()
        for direction in cls:
            if direction.value.lower() == normalized:
                return direction
        raise ValueError(f"Unknown axis direction: {value!r}")


@dataclass(frozen=True)
class Identifier:
    """A (codespace, code) pair identifying an object in an authority registry."""
    code: str
    codespace: str = EPSG
    version: Optional[str] = None

    @classmethod
    def for_code(cls, code: int) -> Identifier:
        return cls(str(code))

    def __str__(self) -> str:
        return f"{self.codespace}:{self.code}"


def properties(code: Optional[int], name: str, **extra: Any) -> Dict[str, Any]:
    """Build the property bag given to a constructive factory."""
    bag: Dict[str, Any] = {NAME_KEY: name}
    if code is not None:
        bag[IDENTIFIERS_KEY] = (Identifier.for_code(code),)
    bag.update(extra)
    return bag


# =============================================================================
# Objects
# =============================================================================

@runtime_checkable
class IdentifiedObject(Protocol):
    name: str
    aliases: Sequence[Any]
    identifiers: Sequence[Any]


class Ellipsoid(IdentifiedObject, Protocol):
    semi_major_axis: float
    semi_minor_axis: float
    inverse_flattening: float
    is_ivf_definitive: bool
    is_sphere: bool
    axis_unit: Unit


class PrimeMeridian(IdentifiedObject, Protocol):
    greenwich_longitude: float
    angular_unit: Unit


class GeodeticDatum(IdentifiedObject, Protocol):
    ellipsoid: Ellipsoid
    prime_meridian: PrimeMeridian
    anchor_point: Optional[str]


class VerticalDatum(IdentifiedObject, Protocol):
    anchor_point: Optional[str]


class CoordinateSystemAxis(IdentifiedObject, Protocol):
    abbreviation: str
    direction: AxisDirection
    unit: Unit


class CoordinateSystem(IdentifiedObject, Protocol):
    axes: Sequence[CoordinateSystemAxis]


class SingleCRS(IdentifiedObject, Protocol):
    datum: Any
    coordinate_system: CoordinateSystem


class GeodeticCRS(SingleCRS, Protocol):
    datum: GeodeticDatum


class VerticalCRS(SingleCRS, Protocol):
    datum: VerticalDatum


class ProjectedCRS(SingleCRS, Protocol):
    base_crs: GeodeticCRS
    datum: GeodeticDatum


class OperationMethod(IdentifiedObject, Protocol):
    pass


class CoordinateOperation(IdentifiedObject, Protocol):
    method: OperationMethod
    operation_version: Optional[str]
    parameters: Any


# =============================================================================
# Authority factories
# =============================================================================

class CRSAuthorityFactory(Protocol):
    def create_geographic_crs(self, code: str) -> GeodeticCRS: ...
    def create_geocentric_crs(self, code: str) -> GeodeticCRS: ...
    def create_projected_crs(self, code: str) -> ProjectedCRS: ...
    def create_vertical_crs(self, code: str) -> VerticalCRS: ...


class CSAuthorityFactory(Protocol):
    def create_coordinate_system(self, code: str) -> CoordinateSystem: ...


class DatumAuthorityFactory(Protocol):
    def create_ellipsoid(self, code: str) -> Ellipsoid: ...
    def create_prime_meridian(self, code: str) -> PrimeMeridian: ...
    def create_geodetic_datum(self, code: str) -> GeodeticDatum: ...
    def create_vertical_datum(self, code: str) -> VerticalDatum: ...


class CoordinateOperationAuthorityFactory(Protocol):
    def create_coordinate_operation(self, code: str) -> CoordinateOperation: ...


# =============================================================================
# Constructive factories
# =============================================================================

class DatumFactory(Protocol):
    def create_ellipsoid(self, properties: Properties, semi_major_axis: float,
                         semi_minor_axis: float, unit: Unit) -> Ellipsoid: ...

    def create_flattened_sphere(self, properties: Properties, semi_major_axis: float,
                                inverse_flattening: float, unit: Unit) -> Ellipsoid: ...

    def create_prime_meridian(self, properties: Properties, longitude: float,
                              unit: Unit) -> PrimeMeridian: ...

    def create_geodetic_datum(self, properties: Properties, ellipsoid: Ellipsoid,
                              prime_meridian: PrimeMeridian) -> GeodeticDatum: ...

    def create_vertical_datum(self, properties: Properties) -> VerticalDatum: ...


class CSFactory(Protocol):
    def create_coordinate_system_axis(self, properties: Properties, abbreviation: str,
                                      direction: AxisDirection, unit: Unit) -> CoordinateSystemAxis: ...

    def create_ellipsoidal_cs(self, properties: Properties,
                              *axes: CoordinateSystemAxis) -> CoordinateSystem: ...

    def create_cartesian_cs(self, properties: Properties,
                            *axes: CoordinateSystemAxis) -> CoordinateSystem: ...

    def create_vertical_cs(self, properties: Properties,
                           axis: CoordinateSystemAxis) -> CoordinateSystem: ...


class CRSFactory(Protocol):
    def create_geographic_crs(self, properties: Properties, datum: GeodeticDatum,
                              cs: CoordinateSystem) -> GeodeticCRS: ...

    def create_geocentric_crs(self, properties: Properties, datum: GeodeticDatum,
                              cs: CoordinateSystem) -> GeodeticCRS: ...

    def create_vertical_crs(self, properties: Properties, datum: VerticalDatum,
                            cs: CoordinateSystem) -> VerticalCRS: ...


__all__ = [
    "EPSG",
    "NAME_KEY",
    "IDENTIFIERS_KEY",
    "ALIAS_KEY",
    "ANCHOR_POINT_KEY",
    "FactoryError",
    "NoSuchAuthorityCodeError",
    "AxisDirection",
    "Identifier",
    "properties",
    "IdentifiedObject",
    "Ellipsoid",
    "PrimeMeridian",
    "GeodeticDatum",
    "VerticalDatum",
    "CoordinateSystemAxis",
    "CoordinateSystem",
    "SingleCRS",
    "GeodeticCRS",
    "VerticalCRS",
    "ProjectedCRS",
    "OperationMethod",
    "CoordinateOperation",
    "CRSAuthorityFactory",
    "CSAuthorityFactory",
    "DatumAuthorityFactory",
    "CoordinateOperationAuthorityFactory",
    "DatumFactory",
    "CSFactory",
    "CRSFactory",
]
