"""Module to parse and load XML string catalogs.

A primary catalog looks like::

    <?xml version="1.0" encoding="utf-8"?>
    <resources language="en">
        <translation language="de"/>
        <translation language="es">spanish.xml</translation>
        <string name="greeting">Hello</string>
    </resources>

Translation catalogs have the same shape without the ``language`` attribute
and without ``translation`` elements. Every identifier of a translation
catalog must be defined by the primary catalog.
"""
import logging
import posixpath
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import NamedTuple

from catalog_i18n.core.string_table import StringTable
from catalog_i18n.core.types import (
    CATALOG_DIRECTORY,
    PRIMARY_CATALOG_NAME,
    LanguageCode,
    StringResource,
    Translation,
    default_translation_name,
    is_language_code,
)
from catalog_i18n.exceptions import CatalogFormatError, CatalogNotFoundError

logger = logging.getLogger(__name__)

ROOT_TAG = "resources"
TRANSLATION_TAG = "translation"
STRING_TAG = "string"
LANGUAGE_ATTRIBUTE = "language"
NAME_ATTRIBUTE = "name"


class Catalog(NamedTuple):
    """A validated catalog: its string table and, if primary, its translations."""

    translations: tuple[Translation, ...]
    table: StringTable


class LoadedCatalogs(NamedTuple):
    """The primary catalog and the tables of all its translations."""

    primary: Catalog
    translation_tables: tuple[StringTable, ...]


def _parse_root(document: str | bytes, language: str | None) -> ET.Element:
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise CatalogFormatError(f"invalid XML: {e}", language=language) from e

    if root.tag != ROOT_TAG:
        raise CatalogFormatError(
            f"root element must be `{ROOT_TAG}`, not `{root.tag}`", language=language
        )
    # iter() yields the root itself first
    if sum(1 for _ in root.iter(ROOT_TAG)) > 1:
        raise CatalogFormatError(
            f"`{ROOT_TAG}` element must appear only once", language=language
        )
    return root


def _check_language(language: str, language_context: str | None) -> LanguageCode:
    if not is_language_code(language):
        raise CatalogFormatError(
            f"invalid language code: `{language}`", language=language_context
        )
    return language


def _parse_translations(
    root: ET.Element, language: LanguageCode
) -> tuple[Translation, ...]:
    translations: list[Translation] = []
    seen = {language}
    for element in root.findall(TRANSLATION_TAG):
        if LANGUAGE_ATTRIBUTE not in element.attrib:
            raise CatalogFormatError(
                "translation element must have `language` attribute",
                language=language,
            )
        translation_language = _check_language(
            element.attrib[LANGUAGE_ATTRIBUTE], language
        )
        if translation_language in seen:
            raise CatalogFormatError(
                f"language `{translation_language}` is declared more than once",
                language=language,
            )
        seen.add(translation_language)

        override = "".join(element.itertext()).strip()
        translations.append(
            Translation(
                translation_language,
                posixpath.join(
                    CATALOG_DIRECTORY,
                    override or default_translation_name(translation_language),
                ),
            )
        )
    return tuple(translations)


def _parse_strings(
    root: ET.Element, language: LanguageCode, parent_table: StringTable | None
) -> list[StringResource]:
    resources: list[StringResource] = []
    for element in root.findall(STRING_TAG):
        if NAME_ATTRIBUTE not in element.attrib:
            raise CatalogFormatError(
                "string resource must have `name` attribute", language=language
            )
        string_id = element.attrib[NAME_ATTRIBUTE]
        if not string_id:
            raise CatalogFormatError(
                "string resource name cannot be empty", language=language
            )
        if parent_table is not None and parent_table.lookup(string_id) is None:
            raise CatalogFormatError(
                f"unknown string identifier: `{string_id}`", language=language
            )
        resources.append(StringResource(string_id, "".join(element.itertext())))
    return resources


def parse_catalog(
    expected_language: LanguageCode | None,
    document: str | bytes,
    parent_table: StringTable | None = None,
) -> Catalog:
    """Parse and validate a catalog document.

    Args:
        expected_language: Language of a translation catalog, or None to
            parse the primary catalog.
        document: The XML document.
        parent_table: Table of the primary catalog, required to validate the
            identifiers of a translation catalog.

    Returns:
        The catalog, with its resources sorted by identifier.

    Raises:
        CatalogFormatError: If the document is malformed or invalid.
    """
    is_primary = expected_language is None
    root = _parse_root(document, expected_language)

    if is_primary:
        if LANGUAGE_ATTRIBUTE not in root.attrib:
            raise CatalogFormatError(
                "primary catalog must have `language` attribute"
            )
        language = _check_language(root.attrib[LANGUAGE_ATTRIBUTE], None)
        translations = _parse_translations(root, language)
    else:
        language = _check_language(expected_language, expected_language)
        if parent_table is None:
            raise ValueError("a translation catalog needs the primary table")
        if root.find(TRANSLATION_TAG) is not None:
            raise CatalogFormatError(
                "only the primary catalog can list translations", language=language
            )
        translations = ()

    resources = _parse_strings(root, language, None if is_primary else parent_table)
    return Catalog(translations, StringTable.from_resources(language, resources))


def _read_document(path: Path, language: LanguageCode | None) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise CatalogNotFoundError(path, language=language) from e


def load_catalogs(resource_root: Path) -> LoadedCatalogs:
    """Load the primary catalog and all its translations.

    The primary catalog is read from ``<resource_root>/i18n/strings.xml`` and
    each translation from the path it declares, relative to ``resource_root``.

    Raises:
        CatalogFormatError: If any catalog is malformed or invalid.
        CatalogNotFoundError: If any catalog file is missing.
    """
    primary_path = resource_root / CATALOG_DIRECTORY / PRIMARY_CATALOG_NAME
    primary = parse_catalog(None, _read_document(primary_path, None))
    logger.info(
        "Loaded primary catalog %s: language %s, %d strings, %d translations",
        primary_path,
        primary.table.language,
        len(primary.table),
        len(primary.translations),
    )

    tables: list[StringTable] = []
    for translation in primary.translations:
        path = resource_root / translation.path
        catalog = parse_catalog(
            translation.language,
            _read_document(path, translation.language),
            primary.table,
        )
        logger.debug(
            "Loaded translation catalog %s: %d of %d strings translated",
            path,
            len(catalog.table),
            len(primary.table),
        )
        tables.append(catalog.table)

    return LoadedCatalogs(primary, tuple(tables))
