"""
Name, alias and identifier comparisons.

Names reported by an implementation may use typographic characters where the
EPSG dataset tables use ASCII (or the reverse), so names are folded to ASCII
before comparison.
"""
import unicodedata
from typing import Any, Iterable, Optional, Sequence

from .asserts import ConformanceFailure, fail
from .configuration import ConfigurationKey
from .referencing import EPSG

# Expected value matching any actual value in unicode identifier comparisons.
UNRESTRICTED = "##unrestricted"

_PUNCTUATION_REPLACEMENTS = {
    "‘": "'",
    "’": "'",
    "⋅": "*",
    "∕": "/",
    "′": "'",
    "″": '"',
}


def to_ascii(text: Optional[str]) -> Optional[str]:
    """
    Fold a name to ASCII: diacritics are removed, typographic quotes, minute and
    second marks become their ASCII equivalents and compatibility glyphs are
    expanded (e.g. 'Côte d’Ivoire' becomes "Cote d'Ivoire").
    """
    if text is None:
        return None
    folded = []
    for c in unicodedata.normalize("NFKD", "".join(_PUNCTUATION_REPLACEMENTS.get(c, c) for c in text)):
        category = unicodedata.category(c)
        if category in ("Cf", "Cc", "Mn"):
            continue
        if category in ("Zl", "Zp"):
            c = "\n"
        elif category == "Zs":
            c = " "
        elif category == "Pi":
            c = "'" if c == "‘" else '"'
        elif category == "Pf":
            c = "'" if c == "’" else '"'
        folded.append(c)
    return "".join(folded)


def get_name(obj: Any) -> Optional[str]:
    """Return the primary name of an object, or None."""
    if obj is None:
        return None
    name = getattr(obj, "name", None)
    if name is None:
        return None
    return str(getattr(name, "code", name))


def alias_text(alias: Any) -> str:
    tip = getattr(alias, "tip", None)
    if callable(tip):
        return str(tip())
    return str(alias)


def names_match(expected: str, actual: Optional[str], full: bool = True) -> bool:
    """Compare ASCII-folded names ignoring case; in prefix mode the actual name may be longer."""
    if actual is None:
        return False
    expected = to_ascii(expected).casefold()
    actual = to_ascii(actual).casefold()
    return expected == actual if full else actual.startswith(expected)


def assert_name_equals(
    expected: str,
    actual: Optional[str],
    path: str,
    full: bool = True,
    key: Optional[ConfigurationKey] = None,
) -> None:
    if not names_match(expected, actual, full):
        how = "expected" if full else "expected a name starting with"
        raise ConformanceFailure(
            f"{path}: {how} “{expected}” but got “{actual}”.",
            path=path, expected=expected, actual=actual, key=key,
        )


def assert_aliases_contain(
    expected: Sequence[str],
    aliases: Optional[Iterable[Any]],
    path: str,
    key: Optional[ConfigurationKey] = None,
) -> None:
    """Every expected alias must be among the actual aliases; extra aliases are allowed."""
    if aliases is None:
        fail("aliases are missing.", path, key)
    actual = [to_ascii(alias_text(a)).casefold() for a in aliases]
    for search in expected:
        if to_ascii(search).casefold() not in actual:
            raise ConformanceFailure(
                f"{path}: alias not found: {search}",
                path=path, expected=search, actual=list(actual), key=key,
            )


def _is_codespace(identifier: Any, codespace: str) -> bool:
    space = getattr(identifier, "codespace", None)
    return space is not None and str(space).strip().lower() == codespace.lower()


def assert_identifier_equals(
    expected: int,
    identifiers: Optional[Iterable[Any]],
    path: str,
    key: Optional[ConfigurationKey] = None,
) -> None:
    """
    Check that exactly one EPSG identifier is present and that it holds the expected code.

    Raises:
        ConformanceFailure: If no EPSG identifier or more than one is found,
            if the code differs, or if the code is not an integer
    """
    if identifiers is None:
        fail("identifiers are missing.", f"{path}.identifiers", key)
    found = 0
    for identifier in identifiers:
        if identifier is None or not _is_codespace(identifier, EPSG):
            continue
        found += 1
        code = getattr(identifier, "code", None)
        try:
            actual = int(str(code).strip())
        except ValueError:
            raise ConformanceFailure(
                f"{path}.identifiers[*].code: expected {expected} but got a non-numerical value: {code!r}",
                path=f"{path}.identifiers[*].code", expected=expected, actual=code, key=key,
            ) from None
        if actual != expected:
            raise ConformanceFailure(
                f"{path}.identifiers[*].code: expected {expected} but got {actual}.",
                path=f"{path}.identifiers[*].code", expected=expected, actual=actual, key=key,
            )
    if found != 1:
        raise ConformanceFailure(
            f"{path}.identifiers[*]: expected exactly one occurrence of {EPSG}:{expected} but found {found}.",
            path=f"{path}.identifiers", expected=1, actual=found, key=key,
        )


def assert_contains_code(
    path: str,
    codespace: str,
    code: int,
    identifiers: Optional[Iterable[Any]],
    key: Optional[ConfigurationKey] = None,
) -> None:
    """Check that at least one identifier in the given codespace has the given code."""
    if identifiers is None:
        fail("identifiers are missing.", path, key)
    for identifier in identifiers:
        if identifier is not None and _is_codespace(identifier, codespace):
            text = str(getattr(identifier, "code", "")).strip()
            if text == str(code):
                return
            if not text.isdigit():
                fail(f"expected {code} but got a non-numerical value: {text!r}", path, key)
    fail(f"identifier {codespace}:{code} not found.", path, key)


def _is_identifier_char(c: str, part: bool) -> bool:
    return ("a" + c).isidentifier() if part else c.isidentifier()


def assert_unicode_identifier_equals(
    expected: Optional[str],
    actual: Optional[str],
    path: str,
    ignore_case: bool = True,
) -> None:
    """
    Compare only the Unicode identifier characters of two strings.

    Spaces and punctuation are skipped, so 'GIGS geogCRS A' matches
    'GIGS-geogCRS-A'. The special value '##unrestricted' matches anything.
    """
    if expected == UNRESTRICTED:
        return
    if (expected is None) != (actual is None):
        fail("value is missing." if actual is None else "expected no value.", path)
    if expected is None:
        return

    value_offset = 0
    expected_part = False
    value_part = False
    for exp_offset, exp_char in enumerate(expected):
        if not _is_identifier_char(exp_char, expected_part):
            continue
        expected_part = True
        while True:
            if value_offset >= len(actual):
                fail(f"expected “{expected}” but got “{actual}”. Missing part: “{expected[exp_offset:]}”.", path)
            value_char = actual[value_offset]
            value_offset += 1
            if _is_identifier_char(value_char, value_part):
                break
        value_part = True
        a, b = exp_char, value_char
        if ignore_case:
            a, b = a.lower(), b.lower()
        if a != b:
            fail(f"expected “{expected}” but got “{actual}”.", path)

    for trailing in range(value_offset, len(actual)):
        if _is_identifier_char(actual[trailing], value_part):
            fail(f"expected “{expected}”, but found it with an unexpected trailing string: "
                 f"“{actual[trailing:]}”.", path)


__all__ = [
    "UNRESTRICTED",
    "to_ascii",
    "get_name",
    "alias_text",
    "names_match",
    "assert_name_equals",
    "assert_aliases_contain",
    "assert_identifier_equals",
    "assert_contains_code",
    "assert_unicode_identifier_equals",
]
