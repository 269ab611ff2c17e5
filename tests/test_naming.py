import pytest

from gigs.asserts import ConformanceFailure
from gigs.configuration import ConfigurationKey
from gigs.naming import (
    UNRESTRICTED,
    assert_aliases_contain,
    assert_contains_code,
    assert_identifier_equals,
    assert_name_equals,
    assert_unicode_identifier_equals,
    names_match,
    to_ascii,
)
from gigs.referencing import Identifier


def test_to_ascii():
    assert to_ascii("Côte d’Ivoire") == "Cote d'Ivoire"
    assert to_ascii("Nouvelle Triangulation Française") == "Nouvelle Triangulation Francaise"
    assert to_ascii(None) is None


def test_to_ascii_is_idempotent():
    once = to_ascii("Côte d’Ivoire")
    assert to_ascii(once) == once


def test_names_match():
    assert names_match("RD Bessel", "rd bessel")
    assert names_match("Reseau National Belge 1972", "Réseau National Belge 1972")
    assert not names_match("UTM zone 31N", "UTM zone 31N extended")
    assert names_match("UTM zone", "UTM zone 31N", full=False)
    assert not names_match("WGS 84", None)


def test_name_failure_carries_key():
    with pytest.raises(ConformanceFailure) as info:
        assert_name_equals("ODN height", "Newlyn height", "VerticalCRS.name",
                           key=ConfigurationKey.IS_STANDARD_NAME_SUPPORTED)
    assert info.value.path == "VerticalCRS.name"
    assert info.value.expected == "ODN height"
    assert info.value.key is ConfigurationKey.IS_STANDARD_NAME_SUPPORTED


def test_aliases_subset():
    assert_aliases_contain(["A", "B"], ["B", "A", "C"], "Datum.aliases")
    with pytest.raises(ConformanceFailure) as info:
        assert_aliases_contain(["A", "D"], ["A", "B", "C"], "Datum.aliases")
    assert "D" in str(info.value)
    assert info.value.expected == "D"


def test_alias_ignores_case():
    assert_aliases_contain(["RD Bessel"], ["rd bessel"], "Datum.aliases")


def test_identifier_exactly_one():
    assert_identifier_equals(4326, [Identifier("4326")], "CRS")
    # Other codespaces are ignored.
    assert_identifier_equals(4326, [Identifier("4326"), Identifier("CRS84", "OGC")], "CRS")

    with pytest.raises(ConformanceFailure) as info:
        assert_identifier_equals(4326, [Identifier("CRS84", "OGC")], "CRS")
    assert "found 0" in str(info.value)

    with pytest.raises(ConformanceFailure) as info:
        assert_identifier_equals(4326, [Identifier("4326"), Identifier("4326")], "CRS")
    assert "found 2" in str(info.value)


def test_identifier_wrong_or_non_numeric_code():
    with pytest.raises(ConformanceFailure) as info:
        assert_identifier_equals(4326, [Identifier("4258")], "CRS")
    assert info.value.actual == 4258
    with pytest.raises(ConformanceFailure) as info:
        assert_identifier_equals(4326, [Identifier("WGS84")], "CRS")
    assert "non-numerical" in str(info.value)


def test_contains_code():
    assert_contains_code("CRS.identifiers", "EPSG", 4326, [Identifier("4326"), Identifier("4979")])
    with pytest.raises(ConformanceFailure):
        assert_contains_code("CRS.identifiers", "EPSG", 4326, [Identifier("4979")])


def test_unicode_identifier_equals():
    assert_unicode_identifier_equals("GIGS geogCRS A", "GIGS-geogCRS-A", "CRS.name")
    assert_unicode_identifier_equals("GIGS geogCRS A", "gigs geogcrs a", "CRS.name")
    assert_unicode_identifier_equals(UNRESTRICTED, "anything", "CRS.name")
    with pytest.raises(ConformanceFailure):
        assert_unicode_identifier_equals("GIGS geogCRS A", "gigs geogcrs a", "CRS.name", ignore_case=False)
    with pytest.raises(ConformanceFailure) as info:
        assert_unicode_identifier_equals("GIGS geogCRS A", "GIGS geogCRS AB", "CRS.name")
    assert "trailing" in str(info.value)
    with pytest.raises(ConformanceFailure) as info:
        assert_unicode_identifier_equals("GIGS geogCRS A", "GIGS geogCRS", "CRS.name")
    assert "Missing part" in str(info.value)
