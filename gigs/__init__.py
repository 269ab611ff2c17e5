"""
Conformance tests of geospatial referencing libraries against the EPSG dataset.

Key Components:
- configuration: flags enabling optional checks, and their overrides file
- predefined: tests of objects created from EPSG codes (GIGS series 2200)
- user_defined: tests of objects built from user values (GIGS series 3200)
- epsg_mock: EPSG reference objects rebuilt through the factories under test
- suite: case discovery and execution
- reporter: Excel and Markdown reports

Usage:
    from gigs import Factories, TestSuite
    entries = TestSuite(factories=Factories(crs_authority_factory=my_factory)).run()
"""

from .asserts import ConformanceFailure
from .base import ConformanceTest, gigs_case
from .configuration import Configuration, ConfigurationKey, ConfigurationOverrides
from .lookup import Found, Unsupported
from .parameters import ExpectedParameter, ParameterGroup, SimpleParameter
from .referencing import AxisDirection, FactoryError, Identifier, NoSuchAuthorityCodeError
from .reporter import ConformanceReporter, generate_markdown_summary
from .suite import ALL_TESTS, Factories, ResultEntry, Status, TestSuite
from .units import Unit, Units
from .validators import Validators

__all__ = [
    "ConformanceFailure",
    "ConformanceTest",
    "gigs_case",
    "Configuration",
    "ConfigurationKey",
    "ConfigurationOverrides",
    "Found",
    "Unsupported",
    "ExpectedParameter",
    "ParameterGroup",
    "SimpleParameter",
    "AxisDirection",
    "FactoryError",
    "Identifier",
    "NoSuchAuthorityCodeError",
    "ConformanceReporter",
    "generate_markdown_summary",
    "ALL_TESTS",
    "Factories",
    "ResultEntry",
    "Status",
    "TestSuite",
    "Units",
    "Unit",
    "Validators",
]
