"""
Base of the tests verifying objects the library creates from EPSG codes.

A test sets ``code``, ``name`` and ``aliases`` (plus the fields specific to its
entity kind), then calls ``verify()``. The object under test is requested from
the authority factory at most once per code and cached.
"""
from typing import Any, Optional, Sequence

from ..asserts import assert_not_none
from ..base import ConformanceTest
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..lookup import Found, LookupResult, found_or_skip, lookup
from ..naming import (
    assert_aliases_contain,
    assert_contains_code,
    assert_identifier_equals,
    assert_name_equals,
    get_name,
)
from ..referencing import EPSG
from ..validators import Validators


class PredefinedObjectTest(ConformanceTest):
    """
    Retrieve-and-cache protocol and identification checks of library-defined objects.

    Attributes:
        code: EPSG code of the object to test
        name: Expected EPSG name
        aliases: Expected aliases (the object may have more)
    """

    type_name = "IdentifiedObject"
    flag_keys = (
        ConfigurationKey.IS_STANDARD_IDENTIFIER_SUPPORTED,
        ConfigurationKey.IS_STANDARD_NAME_SUPPORTED,
        ConfigurationKey.IS_STANDARD_ALIAS_SUPPORTED,
        ConfigurationKey.IS_DEPENDENCY_IDENTIFICATION_SUPPORTED,
        ConfigurationKey.IS_DEPRECATED_OBJECT_CREATION_SUPPORTED,
    )

    def __init__(
        self,
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.code: int = 0
        self.name: Optional[str] = None
        self.aliases: Sequence[str] = ()
        self._result: Optional[LookupResult] = None

    def create_object(self, code: str) -> Any:
        """Invoke the authority factory method creating the object for a code."""
        raise NotImplementedError

    def lookup(self) -> LookupResult:
        """Return the cached lookup result, calling the factory on first use only."""
        if self._result is None:
            self._result = lookup(self.create_object, self.code, self.type_name)
        return self._result

    def get_identified_object(self) -> Any:
        """
        Return the object under test.

        An unsupported code skips the running test.
        """
        return found_or_skip(self.lookup())

    def set_identified_object(self, obj: Any) -> None:
        """Inject an object already created by another test, bypassing the factory."""
        if self._result is not None:
            raise RuntimeError(f"{self.type_name} under test is already set.")
        self._result = Found(obj)

    def reset(self, code: int) -> None:
        """Forget the cached object before testing another code."""
        self.code = code
        self._result = None

    def configure_as_dependency(self, parent: ConformanceTest) -> None:
        """
        Narrow the flags for verifying a sub-object of the parent's object.

        Identification checks additionally require the parent's
        dependency-identification flag, so a wrong datum name is reported once
        by the parent rather than again under the datum's own code. A dependency
        test holds no other state: the narrowed flags alone select its checks.
        """
        super().configure_as_dependency(parent)
        for key in (
            ConfigurationKey.IS_STANDARD_IDENTIFIER_SUPPORTED,
            ConfigurationKey.IS_STANDARD_NAME_SUPPORTED,
            ConfigurationKey.IS_STANDARD_ALIAS_SUPPORTED,
        ):
            setattr(self, key.attribute, getattr(self, key.attribute) and self.is_dependency_identification_supported)

    def get_verifiable_name(self, obj: Any) -> Optional[str]:
        """Name of an object as compared to the expected name; override to transform it."""
        return get_name(obj)

    def verify_object(self, path: str) -> Any:
        """Return the object under test after the validators accepted it."""
        obj = assert_not_none(self.get_identified_object(), path)
        self.validators.validate(obj, path)
        return obj

    def verify_identification(self, obj: Any, path: str, full_name: bool = True, exactly_one: bool = True) -> None:
        """
        Check identifier, name and aliases, each if enabled.

        Args:
            obj: Object under test
            path: Path used in failure messages (e.g. 'VerticalCRS')
            full_name: False if the actual name only needs to start with the expected one
            exactly_one: False if other EPSG identifiers may accompany the expected code
        """
        if exactly_one:
            if self.is_standard_identifier_supported:
                assert_identifier_equals(self.code, obj.identifiers, path,
                                         key=ConfigurationKey.IS_STANDARD_IDENTIFIER_SUPPORTED)
        else:
            assert_contains_code(f"{path}.identifiers", EPSG, self.code, obj.identifiers)
        if self.is_standard_name_supported:
            assert_name_equals(self.name, self.get_verifiable_name(obj), f"{path}.name", full_name,
                               key=ConfigurationKey.IS_STANDARD_NAME_SUPPORTED)
        if self.is_standard_alias_supported:
            assert_aliases_contain(self.aliases, obj.aliases, f"{path}.aliases",
                                   key=ConfigurationKey.IS_STANDARD_ALIAS_SUPPORTED)


__all__ = [
    "PredefinedObjectTest",
]
