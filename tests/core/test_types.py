"""Tests for the core types."""

import pytest

from catalog_i18n.core.types import (
    Locale,
    default_translation_name,
    is_language_code,
)


@pytest.mark.parametrize(
    "value,expected",
    [("en", True), ("ja", True), ("", False), ("en-US", False), ("é", False)],
)
def test_is_language_code(value: str, expected: bool) -> None:
    """Language codes are non-empty ASCII letters."""
    assert is_language_code(value) is expected


def test_default_translation_name() -> None:
    """The conventional file name embeds the language."""
    assert default_translation_name("de") == "strings.de.xml"


class TestLocale:
    """Test cases for the Locale type."""

    def test_defaults(self) -> None:
        """Only the language is required."""
        assert Locale("en") == Locale("en", None, None, None)

    def test_str_full(self) -> None:
        """str() rebuilds the POSIX specification."""
        assert str(Locale("en", "US", "UTF-8", "euro")) == "en_US.UTF-8@euro"

    def test_str_language_only(self) -> None:
        """str() of a language-only locale is the language."""
        assert str(Locale("ja")) == "ja"
