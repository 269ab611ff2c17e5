"""
Authority-code lookups returning an explicit result instead of raising.

An implementation is allowed to omit EPSG entities, so a code the factory does
not know is an ``Unsupported`` result. Only the test layer turns it into a
pytest skip, keeping "not implemented" distinct from "implemented incorrectly".
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

import pytest

from .referencing import NoSuchAuthorityCodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The factory returned an object for the requested code."""
    value: T


@dataclass(frozen=True)
class Unsupported:
    """
    The factory does not know the requested code.

    Attributes:
        type_name: Kind of object requested (e.g. 'GeodeticCRS')
        code: The requested code
        reason: Message of the factory exception, if any
    """
    type_name: str
    code: Any
    reason: Optional[str] = None

    @property
    def message(self) -> str:
        code = self.code if isinstance(self.code, int) else f"“{self.code}”"
        return f"{self.type_name}[{code}] not supported."


LookupResult = Union[Found[T], Unsupported]


def lookup(create: Callable[[str], T], code: Any, type_name: str) -> LookupResult:
    """
    Invoke an authority factory method for a code.

    Args:
        create: Bound factory method taking the code as a string
        code: EPSG code of the object to create
        type_name: Kind of object, used in the unsupported message

    Returns:
        Found with the created object, or Unsupported if the factory raised
        NoSuchAuthorityCodeError. Any other exception propagates.
    """
    try:
        return Found(create(str(code)))
    except NoSuchAuthorityCodeError as e:
        result = Unsupported(type_name, code, str(e) or None)
        logger.info("%s", result.message)
        return result


def found_or_skip(result: LookupResult) -> T:
    """Return the found object, or skip the running test for an unsupported code."""
    if isinstance(result, Unsupported):
        pytest.skip(result.message)
    return result.value


def require_factory(factory: Optional[T], role: str) -> T:
    """Skip the running test if the factory for a role was not supplied."""
    if factory is None:
        pytest.skip(f"No {role} supplied.")
    return factory


__all__ = [
    "Found",
    "Unsupported",
    "LookupResult",
    "lookup",
    "found_or_skip",
    "require_factory",
]
