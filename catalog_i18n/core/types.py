"""Module containing custom types for the catalog_i18n package."""
from typing import NamedTuple

StringId = str
"""Identifier of a string resource, unique within a string table."""

LanguageCode = str
"""ISO-639 language code, e.g. ``"en"`` or ``"ja"``."""

CATALOG_DIRECTORY = "i18n"
"""Directory, relative to the resource root, holding the catalogs."""

PRIMARY_CATALOG_NAME = "strings.xml"
"""File name of the primary catalog inside the catalog directory."""


def is_language_code(value: str) -> bool:
    """Check if the value is a non-empty, ASCII alphabetic language code."""
    return bool(value) and value.isascii() and value.isalpha()


def default_translation_name(language: LanguageCode) -> str:
    """Return the conventional file name of the translation catalog for a language."""
    return f"strings.{language}.xml"


class StringResource(NamedTuple):
    """A string resource: an identifier and its text."""

    id: StringId
    content: str


class Translation(NamedTuple):
    """A translation declared by the primary catalog."""

    language: LanguageCode
    path: str
    """Path of the translation catalog, relative to the resource root."""


class Locale(NamedTuple):
    """A locale parsed from a POSIX locale specification.

    ``en_US.UTF-8@euro`` gives language ``en``, country ``US``, encoding
    ``UTF-8`` and variant ``euro``.
    """

    language: LanguageCode
    country: str | None = None
    encoding: str | None = None
    variant: str | None = None

    def __str__(self) -> str:
        spec = self.language
        if self.country is not None:
            spec += f"_{self.country}"
        if self.encoding is not None:
            spec += f".{self.encoding}"
        if self.variant is not None:
            spec += f"@{self.variant}"
        return spec
