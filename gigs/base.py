"""
Base class of every conformance test.

A test instance holds the comparison flags resolved for it, the factories it
exercises and the validators applied to every object. Nothing is shared
between instances, so test instances can run in parallel processes.

Case methods are marked with ``@gigs_case(display_name)``; the suite
discovers them and runs each one on a fresh instance.
"""
from typing import Any, Callable, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from .configuration import Configuration, ConfigurationKey, ConfigurationOverrides
from .validators import Validators


CASE_ATTRIBUTE = "gigs_case"


def gigs_case(display_name: str) -> Callable:
    """
    Mark a method as a conformance case.

    Args:
        display_name: Name of the tested object, shown in reports

    Usage:
        @gigs_case("WGS 84")
        def epsg_4326(self):
            ...
    """
    def decorator(method: Callable) -> Callable:
        setattr(method, CASE_ATTRIBUTE, display_name)
        return method
    return decorator


@runtime_checkable
class EntityTest(Protocol):
    """Operations every per-entity test exposes."""

    def get_identified_object(self) -> Any: ...

    def configure_as_dependency(self, parent: "ConformanceTest") -> None: ...

    def verify(self) -> None: ...


class ConformanceTest:
    """
    Flags, factories and validators of one test instance.

    Attributes:
        series: GIGS test series number (e.g. 2205)
        flag_keys: Boolean configuration keys held by this test as attributes
        factory_roles: Factory keys held by this test as attributes
        overrides: Configuration overrides this test was created with
        validators: Consistency checks applied to every tested object
    """

    # Not collected by pytest, even when imported in a test module.
    __test__ = False

    series: int = 0
    flag_keys: Tuple[ConfigurationKey, ...] = ()
    factory_roles: Tuple[ConfigurationKey, ...] = ()

    def __init__(
        self,
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
    ):
        self.overrides = overrides if overrides is not None else ConfigurationOverrides.from_environment()
        self.validators = validators or Validators()
        for key, enabled in zip(self.flag_keys, self.overrides.resolve_flags(self.flag_keys)):
            setattr(self, key.attribute, enabled)

    @classmethod
    def cases(cls) -> List[Tuple[str, str]]:
        """Return (method name, display name) of every case, in definition order."""
        found = {}
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                display_name = getattr(member, CASE_ATTRIBUTE, None)
                if display_name is not None:
                    found[name] = display_name
        return list(found.items())

    def apply_case_options(self, case_name: str) -> None:
        """Apply the flags configured for one case, replacing the global values."""
        for key, enabled in self.overrides.for_case(type(self).__name__, case_name).items():
            if key in self.flag_keys:
                setattr(self, key.attribute, enabled)

    def configure_as_dependency(self, parent: "ConformanceTest") -> None:
        """
        Narrow the flags of this test to those of the test it is a dependency of.

        Each flag becomes ``own AND parent``; a flag the parent does not hold is
        left unchanged. Flags are never widened.
        """
        for key in self.flag_keys:
            if hasattr(parent, key.attribute):
                setattr(self, key.attribute, getattr(self, key.attribute) and getattr(parent, key.attribute))

    def record_configuration(self, config: Configuration) -> None:
        for key in self.flag_keys + self.factory_roles:
            config.record(key, getattr(self, key.attribute))
        config.record(ConfigurationKey.VALIDATORS, self.validators)

    def configuration(self) -> Mapping[ConfigurationKey, Any]:
        """
        Return the frozen configuration of this test.

        Raises:
            ConfigurationConflictError: If a key would be recorded twice
        """
        config = Configuration()
        self.record_configuration(config)
        return config.freeze()


__all__ = [
    "gigs_case",
    "EntityTest",
    "ConformanceTest",
]
