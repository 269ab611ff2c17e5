"""
Assertion helpers reporting the expected value, the actual value and the
path of the compared property.

Failures raised while an optional feature is checked carry the configuration
key of that feature, so a report can tell the implementer which flag to turn
off to skip the check.
"""
import math
from typing import Any, Optional, Sequence

from .configuration import ConfigurationKey

_MISSING = object()


class ConformanceFailure(AssertionError):
    """
    A verified property differs from the expected value.

    Attributes:
        path: Dotted path of the property (e.g. 'VerticalCRS.datum.identifiers')
        expected: Expected value, if any
        actual: Actual value, if any
        key: Configuration key of the optional feature being checked, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected: Any = _MISSING,
        actual: Any = _MISSING,
        key: Optional[ConfigurationKey] = None,
    ):
        super().__init__(message)
        self.path = path
        self.expected = None if expected is _MISSING else expected
        self.actual = None if actual is _MISSING else actual
        self.key = key


def _describe(path: Optional[str], message: str) -> str:
    return f"{path}: {message}" if path else message


def fail(message: str, path: Optional[str] = None, key: Optional[ConfigurationKey] = None) -> None:
    raise ConformanceFailure(_describe(path, message), path=path, key=key)


def assert_not_none(value: Any, path: str, key: Optional[ConfigurationKey] = None) -> Any:
    if value is None:
        raise ConformanceFailure(_describe(path, "value is missing."), path=path, key=key)
    return value


def assert_equal(expected: Any, actual: Any, path: str, key: Optional[ConfigurationKey] = None) -> None:
    if expected != actual:
        raise ConformanceFailure(
            _describe(path, f"expected {expected!r} but got {actual!r}."),
            path=path, expected=expected, actual=actual, key=key,
        )


def assert_close(
    expected: float,
    actual: float,
    tolerance: float,
    path: str,
    key: Optional[ConfigurationKey] = None,
) -> None:
    if actual is None or math.isnan(actual) or abs(expected - actual) > tolerance:
        raise ConformanceFailure(
            _describe(path, f"expected {expected!r} but got {actual!r} (tolerance {tolerance:g})."),
            path=path, expected=expected, actual=actual, key=key,
        )


def assert_length(expected: int, values: Sequence[Any], path: str) -> None:
    actual = len(values)
    if actual != expected:
        raise ConformanceFailure(
            _describe(path, f"expected {expected} elements but got {actual}."),
            path=path, expected=expected, actual=actual,
        )


__all__ = [
    "ConformanceFailure",
    "fail",
    "assert_not_none",
    "assert_equal",
    "assert_close",
    "assert_length",
]
