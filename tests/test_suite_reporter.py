import logging
import pytest

from gigs.base import EntityTest
from gigs.configuration import ConfigurationKey
from gigs.predefined import GeodeticCRSTest, VerticalCRSTest
from gigs.reporter import ConformanceReporter, generate_markdown_summary, results_frame
from gigs.suite import ALL_TESTS, Factories, Status, TestSuite, pytest_params, summarize
from gigs.user_defined import UserVerticalCRSTest


@pytest.fixture()
def factories(factory, authority):
    return Factories(
        crs_authority_factory=authority,
        datum_authority_factory=authority,
        cop_authority_factory=authority,
        crs_factory=factory,
        cs_factory=factory,
        datum_factory=factory,
    )


def test_discover_needs_every_role(authority, overrides, caplog):
    suite = TestSuite([GeodeticCRSTest, UserVerticalCRSTest], Factories(crs_authority_factory=authority),
                      overrides=overrides)
    with caplog.at_level(logging.INFO, logger="gigs.suite"):
        found = suite.discover()
    assert {test_class for test_class, _, _ in found} == {GeodeticCRSTest}
    assert "Not running UserVerticalCRSTest" in caplog.text


def test_run(factories, overrides):
    suite = TestSuite([GeodeticCRSTest, UserVerticalCRSTest], factories, overrides=overrides)
    entries = suite.run()

    by_case = {e.case: e for e in entries}
    assert by_case["epsg_4326"].status is Status.PASSED
    assert by_case["epsg_4230"].status is Status.SKIPPED
    assert "not supported" in by_case["epsg_4230"].message
    assert summarize(entries) == {"passed": 7, "failed": 0, "skipped": 4}

    entry = by_case["gigs_64502"]
    assert entry.series == 3210
    assert entry.display_name == "GIGS vertCRS U1 depth"
    assert entry.test_id == "UserVerticalCRSTest.gigs_64502"
    assert entry.configuration["isFactoryPreservingUserValues"] is True


def test_failure_reports_key(factories, authority, overrides, caplog):
    authority.replace("create_vertical_crs", 5701, aliases=())
    suite = TestSuite([VerticalCRSTest], factories, overrides=overrides)
    with caplog.at_level(logging.INFO, logger="gigs.suite"):
        entries = suite.run()

    entry = entries[0]
    assert entry.case == "epsg_5701"
    assert entry.status is Status.FAILED
    assert entry.key is ConfigurationKey.IS_STANDARD_ALIAS_SUPPORTED
    assert "isStandardAliasSupported" in caplog.text


def test_unexpected_error_is_a_failure(factories, authority, overrides):
    def broken(code):
        raise ZeroDivisionError("division by zero")

    authority.create_vertical_crs = broken
    entries = TestSuite([VerticalCRSTest], factories, overrides=overrides).run()
    assert all(e.status is Status.FAILED for e in entries)
    assert entries[0].message.startswith("ZeroDivisionError")


def test_run_case_propagates(factories, authority, overrides):
    suite = TestSuite(factories=factories, overrides=overrides)
    test = suite.run_case(GeodeticCRSTest, "epsg_4326")
    assert test.crs_authority_factory is authority
    with pytest.raises(pytest.skip.Exception):
        suite.run_case(GeodeticCRSTest, "epsg_4230")


def test_pytest_params(factories, overrides):
    suite = TestSuite(factories=factories, overrides=overrides)
    params = pytest_params(suite)
    assert len(params) == len(suite.discover())
    assert params[0].id == "EllipsoidTest.epsg_7004"


def test_every_test_has_cases():
    for test_class in ALL_TESTS:
        assert test_class.series
        assert test_class.cases(), test_class.__name__


def test_factories_as_dict(factory):
    roles = Factories(cs_factory=factory).as_dict()
    assert roles["csFactory"] is factory
    assert roles["crsFactory"] is None
    assert len(roles) == 7


def test_excel_report(factories, overrides, tmp_path):
    entries = TestSuite([GeodeticCRSTest], factories, overrides=overrides).run()
    reporter = ConformanceReporter(factories)
    reporter.add_entries(entries)

    path = tmp_path / "reports" / "gigs.xlsx"
    data = reporter.generate(str(path))
    assert data[:2] == b"PK"
    assert path.read_bytes() == data

    frame = results_frame(entries)
    assert list(frame["Status"]).count("passed") == 2
    assert frame.loc[frame["Case"] == "epsg_4978", "Object"].item() == "WGS 84 (geocentric)"


def test_markdown_summary(factories, overrides):
    entries = TestSuite([GeodeticCRSTest], factories, overrides=overrides).run()
    md = generate_markdown_summary(entries)
    assert "# GIGS Conformance Summary" in md
    assert "| 2205 | GeodeticCRSTest | WGS 84 | ✅ PASS |" in md
    assert "⏭️ SKIP" in md
    assert "**Overall:** 2/6 passed, 4 skipped" in md


def test_every_test_is_an_entity_test(factories, overrides):
    suite = TestSuite(factories=factories, overrides=overrides)
    for test_class in ALL_TESTS:
        assert isinstance(suite.create_test(test_class), EntityTest)
