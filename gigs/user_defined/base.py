"""
Base of the tests verifying objects built from user-supplied values.

A case fills ``properties`` (code, name, maybe an anchor point) and the values
specific to its entity kind, builds the sub-objects it needs, then calls the
test's ``verify()``. The object is built through the constructive factories on
first access and cached.

Sub-objects are built by running a case of another user-defined test with
``skip_tests`` set, so the builder only constructs. Once the parent object
exists, the same sub-test verifies the sub-object actually embedded in it.
"""
from typing import Any, Callable, Dict, Optional, TypeVar

from ..asserts import assert_not_none
from ..base import ConformanceTest
from ..configuration import ConfigurationKey, ConfigurationOverrides
from ..referencing import IDENTIFIERS_KEY, NAME_KEY, Identifier
from ..structure import verify_identification
from ..validators import Validators

PRESERVING = ConfigurationKey.IS_FACTORY_PRESERVING_USER_VALUES

T = TypeVar("T", bound="UserObjectTest")


class UserObjectTest(ConformanceTest):
    """
    Build-and-cache protocol and identification checks of user-defined objects.

    Attributes:
        properties: Property bag given to the constructive factory
        skip_tests: True when the case only builds the object for another test
    """

    type_name = "IdentifiedObject"
    flag_keys = (PRESERVING,)

    def __init__(
        self,
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        super().__init__(overrides, validators)
        self.properties: Dict[str, Any] = {}
        self.skip_tests = False
        self._object: Any = None

    def set_code_and_name(self, code: int, name: str) -> None:
        """
        Raises:
            ValueError: If the code or name was already set
        """
        for key in (NAME_KEY, IDENTIFIERS_KEY):
            if key in self.properties:
                raise ValueError(f"Property “{key}” is already set.")
        self.properties[NAME_KEY] = name
        self.properties[IDENTIFIERS_KEY] = (Identifier.for_code(code),)

    def get_code(self) -> Optional[str]:
        identifiers = self.properties.get(IDENTIFIERS_KEY)
        return identifiers[0].code if identifiers else None

    def get_name(self) -> Optional[str]:
        return self.properties.get(NAME_KEY)

    def create_object(self) -> Any:
        """Build the object under test through the constructive factory."""
        raise NotImplementedError

    def get_identified_object(self) -> Any:
        """Return the object under test, building it on first use only."""
        if self._object is None:
            self._object = self.create_object()
        return self._object

    def set_identified_object(self, obj: Any) -> None:
        """Replace the object under test, typically by the one embedded in a parent object."""
        self._object = obj

    def verify_object(self, path: str) -> Any:
        obj = assert_not_none(self.get_identified_object(), path)
        self.validators.validate(obj, path)
        return obj

    def verify_identification(self, obj: Any, path: str) -> None:
        verify_identification(obj, self.get_name(), self.get_code(), path)

    def build_with(self, test: T, case: Callable[[T], None]) -> T:
        """
        Run a case of another test only to build its object.

        Args:
            test: Fresh instance of the builder test
            case: Unbound case method of the builder test (e.g. ``UserEllipsoidTest.gigs_67030``)

        Returns:
            The builder test, holding the built object
        """
        test.skip_tests = True
        case(test)
        test.get_identified_object()
        return test

    def verify_dependency(self, test: Optional["UserObjectTest"], obj: Any) -> None:
        """
        Verify a sub-object of the object under test with the test that built it.

        The builder's flags are narrowed to this test's flags before verifying.
        """
        if test is None:
            return
        test.configure_as_dependency(self)
        test.skip_tests = False
        test.set_identified_object(obj)
        test.verify()

    def verify(self) -> None:
        raise NotImplementedError


__all__ = [
    "UserObjectTest",
]
