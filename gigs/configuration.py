"""
Configuration of a conformance run.

Records which comparison features were enabled and which factories took part
in a test, and loads the optional JSON file that lets an implementation
disable checks for features it does not support.

Overrides file format (path given explicitly or by the GIGS_CONFIG variable):

    {
        "*": {"isStandardAliasSupported": false},
        "VerticalCRSTest.epsg_5701": {"isDependencyIdentificationSupported": false}
    }
"""

import json
import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

CONFIG_ENVIRONMENT_VARIABLE = "GIGS_CONFIG"
ALL_TESTS = "*"


class ConfigurationKey(str, Enum):
    """Keys of the configuration map, named as in the GIGS reports."""

    IS_STANDARD_IDENTIFIER_SUPPORTED = "isStandardIdentifierSupported"
    IS_STANDARD_NAME_SUPPORTED = "isStandardNameSupported"
    IS_STANDARD_ALIAS_SUPPORTED = "isStandardAliasSupported"
    IS_DEPENDENCY_IDENTIFICATION_SUPPORTED = "isDependencyIdentificationSupported"
    IS_DEPRECATED_OBJECT_CREATION_SUPPORTED = "isDeprecatedObjectCreationSupported"
    IS_OPERATION_VERSION_SUPPORTED = "isOperationVersionSupported"
    IS_FACTORY_PRESERVING_USER_VALUES = "isFactoryPreservingUserValues"

    CRS_AUTHORITY_FACTORY = "crsAuthorityFactory"
    CS_AUTHORITY_FACTORY = "csAuthorityFactory"
    DATUM_AUTHORITY_FACTORY = "datumAuthorityFactory"
    COP_AUTHORITY_FACTORY = "copAuthorityFactory"
    CRS_FACTORY = "crsFactory"
    CS_FACTORY = "csFactory"
    DATUM_FACTORY = "datumFactory"

    VALIDATORS = "validators"

    @property
    def is_flag(self) -> bool:
        return self.value.startswith("is")

    @property
    def attribute(self) -> str:
        """Snake-case attribute holding this key on a test instance."""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", self.value).lower()

    @classmethod
    def parse(cls, name: str) -> Optional["ConfigurationKey"]:
        for key in cls:
            if key.value == name:
                return key
        return None


class ConfigurationConflictError(AssertionError):
    """Raised when a configuration key is recorded twice in the same snapshot."""


class Configuration:
    """
    Configuration snapshot of one test.

    Every key is written at most once. The snapshot is built by the test's
    ``configuration()`` method and frozen before being handed to callers.

    Usage:
        config = Configuration()
        config.record(ConfigurationKey.IS_STANDARD_NAME_SUPPORTED, True)
        snapshot = config.freeze()
    """

    def __init__(self):
        self._values: Dict[ConfigurationKey, Any] = {}
        self._frozen = False

    def record(self, key: ConfigurationKey, value: Any) -> None:
        """
        Store a value for a key not yet recorded.

        Raises:
            ConfigurationConflictError: If the key already has a value
        """
        if self._frozen:
            raise ConfigurationConflictError("Configuration snapshot is frozen.")
        if key in self._values:
            raise ConfigurationConflictError(
                f"Configuration key “{key.value}” recorded twice "
                f"(previous value: {self._values[key]!r}, new value: {value!r})."
            )
        self._values[key] = value

    def get(self, key: ConfigurationKey, default: Any = None) -> Any:
        return self._values.get(key, default)

    def freeze(self) -> Mapping[ConfigurationKey, Any]:
        self._frozen = True
        return MappingProxyType(dict(self._values))

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)


# =============================================================================
# Overrides file
# =============================================================================

@dataclass
class ValidationError:
    """Represents a problem found in a configuration overrides file."""
    path: str
    message: str
    value: Any = None


def validate_overrides(data: Any) -> List[ValidationError]:
    """
    Validate overrides data against the expected layout.

    Args:
        data: Decoded JSON document

    Returns:
        List of validation errors (empty if valid)
    """
    errors: List[ValidationError] = []

    if not isinstance(data, dict):
        errors.append(ValidationError("", "Overrides must be an object", type(data)))
        return errors

    for scope, options in data.items():
        if scope != ALL_TESTS and scope.count(".") != 1:
            errors.append(ValidationError(
                scope,
                "Scope must be '*' or '<TestClass>.<case>'",
            ))
            continue
        if not isinstance(options, dict):
            errors.append(ValidationError(scope, "Options must be an object", type(options)))
            continue
        for option, value in options.items():
            key = ConfigurationKey.parse(option)
            if key is None:
                errors.append(ValidationError(f"{scope}.{option}", f"Unknown configuration key: {option}"))
            elif not key.is_flag:
                errors.append(ValidationError(f"{scope}.{option}", f"The “{option}” option is not a boolean"))
            elif not isinstance(value, bool):
                errors.append(ValidationError(f"{scope}.{option}", "Value must be true or false", value))

    return errors


@dataclass(frozen=True)
class ConfigurationOverrides:
    """
    Immutable set of enabled/disabled flags, globally or for single cases.

    Attributes:
        global_options: Flags applying to every test
        case_options: Flags keyed by '<TestClass>.<case>'
        errors: Problems found while loading (the faulty entries are ignored)
    """
    global_options: Mapping[ConfigurationKey, bool] = field(default_factory=dict)
    case_options: Mapping[str, Mapping[ConfigurationKey, bool]] = field(default_factory=dict)
    errors: Sequence[ValidationError] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "ConfigurationOverrides":
        errors = validate_overrides(data)
        invalid = {e.path for e in errors}
        global_options: Dict[ConfigurationKey, bool] = {}
        case_options: Dict[str, Dict[ConfigurationKey, bool]] = {}

        if isinstance(data, dict):
            for scope, options in data.items():
                if scope in invalid or not isinstance(options, dict):
                    continue
                target = global_options if scope == ALL_TESTS else case_options.setdefault(scope, {})
                for option, value in options.items():
                    if f"{scope}.{option}" in invalid:
                        continue
                    target[ConfigurationKey.parse(option)] = value

        for error in errors:
            logger.warning("Ignoring configuration entry %s: %s", error.path or "<root>", error.message)

        return cls(
            global_options=MappingProxyType(global_options),
            case_options=MappingProxyType({k: MappingProxyType(v) for k, v in case_options.items()}),
            errors=tuple(errors),
        )

    @classmethod
    def load(cls, path) -> "ConfigurationOverrides":
        """
        Load overrides from a JSON file.

        A file that can not be read or decoded is logged and treated as empty,
        which leaves every optional check enabled.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Invalid JSON in configuration file %s: %s", path, e)
            return cls(errors=(ValidationError(str(path), f"Invalid JSON in configuration file: {e}"),))
        except OSError as e:
            logger.warning("Can not load configuration file %s: %s", path, e)
            return cls(errors=(ValidationError(str(path), f"Error reading configuration file: {e}"),))
        return cls.from_dict(data)

    @classmethod
    def from_environment(cls) -> "ConfigurationOverrides":
        filename = os.environ.get(CONFIG_ENVIRONMENT_VARIABLE)
        if filename:
            return cls.load(filename)
        return cls()

    def is_enabled(self, key: ConfigurationKey) -> bool:
        """Return whether a flag is enabled globally (enabled unless disabled)."""
        return self.global_options.get(key, True)

    def for_case(self, test_name: str, case_name: str) -> Mapping[ConfigurationKey, bool]:
        return self.case_options.get(f"{test_name}.{case_name}", {})

    def resolve_flags(self, keys: Iterable[ConfigurationKey]) -> List[bool]:
        return [self.is_enabled(key) for key in keys]


__all__ = [
    "CONFIG_ENVIRONMENT_VARIABLE",
    "ConfigurationKey",
    "ConfigurationConflictError",
    "Configuration",
    "ValidationError",
    "validate_overrides",
    "ConfigurationOverrides",
]
