"""
Suite execution.

Discovers the cases of the conformance tests whose factories are available,
runs each case on a fresh test instance and collects the outcomes in a
structured format for reporting.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type

import pytest

from .asserts import ConformanceFailure
from .base import ConformanceTest
from .configuration import ConfigurationKey, ConfigurationOverrides
from .predefined import (
    ConversionTest,
    EllipsoidTest,
    GeodeticCRSTest,
    GeodeticDatumTest,
    PrimeMeridianTest,
    ProjectedCRSTest,
    TransformationTest,
    VerticalCRSTest,
    VerticalDatumTest,
)
from .user_defined import (
    UserEllipsoidTest,
    UserGeodeticCRSTest,
    UserGeodeticDatumTest,
    UserPrimeMeridianTest,
    UserVerticalCRSTest,
    UserVerticalDatumTest,
)
from .validators import Validators

logger = logging.getLogger(__name__)

ALL_TESTS: Tuple[Type[ConformanceTest], ...] = (
    EllipsoidTest,
    PrimeMeridianTest,
    GeodeticDatumTest,
    GeodeticCRSTest,
    ConversionTest,
    ProjectedCRSTest,
    TransformationTest,
    VerticalDatumTest,
    VerticalCRSTest,
    UserEllipsoidTest,
    UserPrimeMeridianTest,
    UserGeodeticDatumTest,
    UserGeodeticCRSTest,
    UserVerticalDatumTest,
    UserVerticalCRSTest,
)


@dataclass
class Factories:
    """
    Factories of the implementation under test, one attribute per role.

    Roles left to None are not supported by the implementation; the tests
    needing them are not run.
    """
    crs_authority_factory: Any = None
    cs_authority_factory: Any = None
    datum_authority_factory: Any = None
    cop_authority_factory: Any = None
    crs_factory: Any = None
    cs_factory: Any = None
    datum_factory: Any = None

    def get(self, role: ConfigurationKey) -> Any:
        return getattr(self, role.attribute)

    def supports(self, test_class: Type[ConformanceTest]) -> bool:
        """Return whether every factory the test needs is available."""
        return all(self.get(role) is not None for role in test_class.factory_roles)

    def as_dict(self) -> Dict[str, Any]:
        return {role.value: self.get(role) for role in ConfigurationKey if role.attribute in vars(self)}


class Status(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class ResultEntry:
    """
    Outcome of one case.

    Attributes:
        series: GIGS test series (e.g. 3210)
        test_class: Name of the test class
        case: Name of the case method
        display_name: Name of the tested object
        status: Passed, failed or skipped
        message: Failure or skip message
        configuration: Configuration snapshot of the test, keyed by configuration key name
        key: Configuration key of the optional check that failed, if any
    """
    series: int
    test_class: str
    case: str
    display_name: str
    status: Status = Status.PASSED
    message: str = ""
    configuration: Dict[str, Any] = field(default_factory=dict)
    key: Optional[ConfigurationKey] = None

    @property
    def test_id(self) -> str:
        return f"{self.test_class}.{self.case}"


class TestSuite:
    """
    Runs conformance cases against a set of factories.

    Usage:
        suite = TestSuite(factories=Factories(datum_authority_factory=my_factory))
        entries = suite.run()
    """

    __test__ = False

    def __init__(
        self,
        test_classes: Sequence[Type[ConformanceTest]] = ALL_TESTS,
        factories: Optional[Factories] = None,
        overrides: Optional[ConfigurationOverrides] = None,
        validators: Optional[Validators] = None,
        verbose: bool = False,
    ):
        """
        Initialize the suite.

        Args:
            test_classes: Test classes to discover cases from
            factories: Factories of the implementation under test
            overrides: Flags to disable; read from GIGS_CONFIG if omitted
            validators: Consistency checks applied to every tested object
            verbose: If True, print progress messages
        """
        self.test_classes = list(test_classes)
        self.factories = factories or Factories()
        self.overrides = overrides if overrides is not None else ConfigurationOverrides.from_environment()
        self.validators = validators or Validators()
        self.verbose = verbose

    def discover(self) -> List[Tuple[Type[ConformanceTest], str, str]]:
        """Return (test class, case name, display name) of every runnable case."""
        found = []
        for test_class in self.test_classes:
            if not self.factories.supports(test_class):
                missing = [r.value for r in test_class.factory_roles if self.factories.get(r) is None]
                logger.info("Not running %s: no %s supplied.", test_class.__name__, ", ".join(missing))
                continue
            for case, display_name in test_class.cases():
                found.append((test_class, case, display_name))
        return found

    def create_test(self, test_class: Type[ConformanceTest]) -> ConformanceTest:
        """Instantiate a test with the factories of its roles, in constructor order."""
        args = [self.factories.get(role) for role in test_class.factory_roles]
        return test_class(*args, overrides=self.overrides, validators=self.validators)

    def run_case(self, test_class: Type[ConformanceTest], case: str) -> ConformanceTest:
        """
        Run one case on a fresh instance, letting failures and skips propagate.

        Returns:
            The test instance, for inspecting its configuration
        """
        test = self.create_test(test_class)
        self._execute(test, case)
        return test

    def _execute(self, test: ConformanceTest, case: str) -> None:
        test.apply_case_options(case)
        getattr(test, case)()

    def run(self) -> List[ResultEntry]:
        """
        Run every discovered case.

        Returns:
            One entry per case, in discovery order
        """
        entries = []
        for test_class, case, display_name in self.discover():
            entries.append(self._run_entry(test_class, case, display_name))
        if self.verbose:
            counts = summarize(entries)
            print(f"  {counts['passed']} passed, {counts['failed']} failed, {counts['skipped']} skipped")
        return entries

    def _run_entry(self, test_class: Type[ConformanceTest], case: str, display_name: str) -> ResultEntry:
        entry = ResultEntry(test_class.series, test_class.__name__, case, display_name)
        test = self.create_test(test_class)
        try:
            self._execute(test, case)
            if self.verbose:
                print(f"  ✓ {entry.test_id}: {display_name}")
        except pytest.skip.Exception as e:
            entry.status = Status.SKIPPED
            entry.message = str(e.msg)
            if self.verbose:
                print(f"  - {entry.test_id}: {entry.message}")
        except ConformanceFailure as e:
            entry.status = Status.FAILED
            entry.message = str(e)
            entry.key = e.key
            if e.key is not None:
                logger.info(
                    "%s failed while testing an optional feature; set “%s” to false "
                    "in the configuration if the implementation does not support it.",
                    entry.test_id, e.key.value,
                )
            if self.verbose:
                print(f"  ✗ {entry.test_id}: {e}")
        except Exception as e:
            entry.status = Status.FAILED
            entry.message = f"{type(e).__name__}: {e}"
            if self.verbose:
                print(f"  ✗ {entry.test_id}: {entry.message}")
        entry.configuration = {key.value: value for key, value in test.configuration().items()}
        return entry


def pytest_params(suite: TestSuite) -> List[Any]:
    """
    Cases of a suite as pytest parameters, for use with ``pytest.mark.parametrize``.

    Usage:
        @pytest.mark.parametrize("test_class,case", pytest_params(suite))
        def test_gigs(test_class, case):
            suite.run_case(test_class, case)
    """
    return [
        pytest.param(test_class, case, id=f"{test_class.__name__}.{case}")
        for test_class, case, _ in suite.discover()
    ]


def summarize(entries: Iterable[ResultEntry]) -> Dict[str, int]:
    """Count entries per status."""
    counts = {status.value: 0 for status in Status}
    for entry in entries:
        counts[entry.status.value] += 1
    return counts


__all__ = [
    "ALL_TESTS",
    "Factories",
    "Status",
    "ResultEntry",
    "TestSuite",
    "pytest_params",
    "summarize",
]
