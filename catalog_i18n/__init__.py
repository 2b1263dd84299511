"""Translated string resources from XML catalogs.

String resources are read from a primary catalog and optional translation
catalogs, and resolved against the user's POSIX/gettext locale preferences.
"""

from catalog_i18n.catalog.catalog_loader import (
    Catalog,
    LoadedCatalogs,
    load_catalogs,
    parse_catalog,
)
from catalog_i18n.core.string_table import StringTable
from catalog_i18n.core.types import Locale, StringResource, Translation
from catalog_i18n.exceptions import (
    CatalogFormatError,
    CatalogI18nError,
    CatalogNotFoundError,
    UnknownStringError,
)
from catalog_i18n.locales.locale_parser import (
    get_preferred_locales,
    parse_locale_preferences,
)
from catalog_i18n.resolver.resolver import Resolver
from catalog_i18n.strings import Strings, get_strings, initialize

__all__ = [
    "Catalog",
    "CatalogFormatError",
    "CatalogI18nError",
    "CatalogNotFoundError",
    "LoadedCatalogs",
    "Locale",
    "Resolver",
    "StringResource",
    "StringTable",
    "Strings",
    "Translation",
    "UnknownStringError",
    "get_preferred_locales",
    "get_strings",
    "initialize",
    "load_catalogs",
    "parse_catalog",
    "parse_locale_preferences",
]
