"""Units of measure used by axes, ellipsoids, prime meridians and parameters."""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Quantity(str, Enum):
    LENGTH = "length"
    ANGLE = "angle"
    SCALE = "scale"


class IncommensurableUnitsError(ValueError):
    """Raised when converting between units of different quantities."""


@dataclass(frozen=True)
class Unit:
    """A unit of measure defined by its factor to the SI base unit of its quantity.

    Attributes:
        name: EPSG unit name (e.g. 'metre', 'US survey foot')
        symbol: Short symbol used in messages
        quantity: Kind of quantity measured
        to_base: Multiplication factor to the base unit (metre, radian, unity)
        epsg_code: EPSG unit code, if any
    """
    name: str
    symbol: str
    quantity: Quantity
    to_base: float
    epsg_code: Optional[int] = None

    def is_compatible(self, other: "Unit") -> bool:
        return other is not None and self.quantity == other.quantity

    def convert_to(self, value: float, target: "Unit") -> float:
        """
        Convert a value expressed in this unit to the target unit.

        Args:
            value: Value in this unit
            target: Unit to convert to

        Returns:
            The value expressed in the target unit

        Raises:
            IncommensurableUnitsError: If the units measure different quantities
        """
        if not self.is_compatible(target):
            raise IncommensurableUnitsError(
                f"Can not convert from “{self.symbol}” to “{getattr(target, 'symbol', target)}”."
            )
        if target == self:
            return value
        return value * self.to_base / target.to_base

    def __str__(self) -> str:
        return self.symbol


class Units:
    """EPSG units needed by the harness, keyed by EPSG code."""

    METRE = Unit("metre", "m", Quantity.LENGTH, 1.0, 9001)
    FOOT = Unit("foot", "ft", Quantity.LENGTH, 0.3048, 9002)
    US_SURVEY_FOOT = Unit("US survey foot", "ftUS", Quantity.LENGTH, 12 / 39.37, 9003)
    KILOMETRE = Unit("kilometre", "km", Quantity.LENGTH, 1000.0, 9036)

    RADIAN = Unit("radian", "rad", Quantity.ANGLE, 1.0, 9101)
    DEGREE = Unit("degree", "°", Quantity.ANGLE, math.pi / 180, 9102)
    ARC_SECOND = Unit("arc-second", "″", Quantity.ANGLE, math.pi / (180 * 3600), 9104)
    GRAD = Unit("grad", "grad", Quantity.ANGLE, math.pi / 200, 9105)

    UNITY = Unit("unity", "", Quantity.SCALE, 1.0, 9201)
    PPM = Unit("parts per million", "ppm", Quantity.SCALE, 1e-6, 9202)

    @classmethod
    def all(cls) -> Dict[int, Unit]:
        return {
            value.epsg_code: value
            for value in vars(cls).values()
            if isinstance(value, Unit) and value.epsg_code is not None
        }

    @classmethod
    def by_code(cls, code: int) -> Unit:
        try:
            return cls.all()[code]
        except KeyError:
            raise KeyError(f"No unit for EPSG code {code}") from None

    @classmethod
    def by_name(cls, name: str) -> Optional[Unit]:
        normalized = name.strip().lower()
        for unit in cls.all().values():
            if unit.name.lower() == normalized:
                return unit
        return None
