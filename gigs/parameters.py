"""
Parameter values used to assemble synthetic operation and coordinate system definitions.

A ``SimpleParameter`` is its own descriptor: it carries the value together with
the descriptor metadata (occurrences, unit) as plain fields, so no separate
parameter-group type hierarchy is needed.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from .asserts import ConformanceFailure, assert_close, assert_equal
from .units import Unit

IMMUTABLE = "This parameter implementation is immutable."

# Relative tolerance of GIGS parameter comparisons.
TOLERANCE = 1e-10


class InvalidParameterTypeError(TypeError):
    """Raised when a typed accessor is used on a value of another kind."""

    def __init__(self, message: str, parameter_name: str):
        super().__init__(f"{message}: {parameter_name}")
        self.parameter_name = parameter_name


class ParameterStateError(RuntimeError):
    """Raised when a unit conversion is requested on a parameter without unit."""


class UnsupportedOperationError(RuntimeError):
    """Raised by every mutator of an immutable parameter."""


class ParameterNotFoundError(KeyError):
    """Raised when a group has no parameter of the requested name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.parameter_name = name

    def __str__(self) -> str:
        return f"A parameter named “{self.parameter_name}” was required but not found."


@dataclass(frozen=True)
class SimpleParameter:
    """
    Immutable named value, optionally bearing a unit.

    Attributes:
        name: Parameter name
        value: A string, a number or a boolean
        unit: Unit of a numeric value, or None
        minimum_occurs: Always 1
        maximum_occurs: Always 1
    """
    name: str
    value: Union[str, float, int, bool]
    unit: Optional[Unit] = None
    minimum_occurs: int = 1
    maximum_occurs: int = 1

    @classmethod
    def of_string(cls, name: str, value: str) -> SimpleParameter:
        return cls(name, value)

    @classmethod
    def of_measure(cls, name: str, value: float, unit: Unit) -> SimpleParameter:
        return cls(name, float(value), unit)

    @property
    def descriptor(self) -> SimpleParameter:
        return self

    @property
    def value_type(self) -> type:
        return type(self.value)

    def _is_number(self) -> bool:
        return isinstance(self.value, (int, float)) and not isinstance(self.value, bool)

    def double_value(self, target: Optional[Unit] = None) -> float:
        """
        Return the numeric value, optionally converted to the target unit.

        Raises:
            InvalidParameterTypeError: If the value is not numeric
            ParameterStateError: If a target unit is given but this parameter has no unit
            IncommensurableUnitsError: If the target unit measures another quantity
        """
        if target is not None and self.unit is None:
            raise ParameterStateError(f"No unit for parameter {self.name}.")
        if not self._is_number():
            raise InvalidParameterTypeError("Not a number", self.name)
        value = float(self.value)
        if target is None:
            return value
        return self.unit.convert_to(value, target)

    def int_value(self) -> int:
        if not self._is_number():
            raise InvalidParameterTypeError("Not a number", self.name)
        if isinstance(self.value, float) and not self.value.is_integer():
            raise InvalidParameterTypeError("Not an integer", self.name)
        return int(self.value)

    def boolean_value(self) -> bool:
        if not isinstance(self.value, bool):
            raise InvalidParameterTypeError("Not a boolean", self.name)
        return self.value

    def string_value(self) -> str:
        if not isinstance(self.value, str):
            raise InvalidParameterTypeError("Not a string", self.name)
        return self.value

    def set_value(self, value: Any, unit: Optional[Unit] = None) -> None:
        raise UnsupportedOperationError(IMMUTABLE)

    def set_double_value(self, value: float, unit: Optional[Unit] = None) -> None:
        raise UnsupportedOperationError(IMMUTABLE)

    def set_int_value(self, value: int) -> None:
        raise UnsupportedOperationError(IMMUTABLE)

    def set_boolean_value(self, value: bool) -> None:
        raise UnsupportedOperationError(IMMUTABLE)

    def set_string_value(self, value: str) -> None:
        raise UnsupportedOperationError(IMMUTABLE)

    def __str__(self) -> str:
        text = f"{type(self).__name__}[“{self.name}” = {self.value}"
        if self.unit is not None:
            text += f" {self.unit}"
        return text + "]"


class ParameterGroup:
    """Ordered, immutable group of parameters with lookup by name."""

    def __init__(self, name: str, parameters: Iterable[SimpleParameter] = ()):
        self.name = name
        self._parameters: Tuple[SimpleParameter, ...] = tuple(parameters)

    def parameter(self, name: str) -> SimpleParameter:
        """
        Return the parameter of the given name, ignoring case.

        Raises:
            ParameterNotFoundError: If no such parameter exists
        """
        for p in self._parameters:
            if p.name.lower() == name.lower():
                return p
        raise ParameterNotFoundError(name)

    @property
    def values(self) -> Tuple[SimpleParameter, ...]:
        return self._parameters

    def __iter__(self) -> Iterator[SimpleParameter]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterGroup):
            return NotImplemented
        return self.name == other.name and self._parameters == other._parameters

    def __hash__(self) -> int:
        return hash((self.name, self._parameters))

    def __repr__(self) -> str:
        return f"ParameterGroup({self.name!r}, {list(self._parameters)!r})"


@dataclass(frozen=True)
class ExpectedParameter:
    """
    Literal expected parameter value of a coordinate operation.

    Usage:
        expected = ExpectedParameter("Scale factor at natural origin", 0.9996, Units.UNITY)
        expected.verify(conversion.parameters)
    """
    name: str
    value: Union[str, float]
    unit: Optional[Unit] = None

    def verify(self, parameters: Any) -> None:
        """
        Check that a parameter group holds the expected value.

        Numeric values are compared in the expected unit with a relative
        tolerance of 1E-10.

        Raises:
            ConformanceFailure: If the parameter is missing or differs
        """
        path = f"parameter(“{self.name}”)"
        try:
            actual = parameters.parameter(self.name)
        except ParameterNotFoundError as e:
            raise ConformanceFailure(str(e), path=path) from e

        if self.unit is not None:
            expected = float(self.value)
            assert_close(expected, actual.double_value(self.unit), math.fabs(expected * TOLERANCE), path)
        else:
            assert_equal(self.value, actual.value, path)


__all__ = [
    "IMMUTABLE",
    "InvalidParameterTypeError",
    "ParameterStateError",
    "UnsupportedOperationError",
    "ParameterNotFoundError",
    "SimpleParameter",
    "ParameterGroup",
    "ExpectedParameter",
]
