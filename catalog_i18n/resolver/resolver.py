"""Module for the Resolver class."""
import bisect
import logging
from typing import Iterable, Mapping

from catalog_i18n.catalog.catalog_loader import LoadedCatalogs
from catalog_i18n.core.string_table import StringTable
from catalog_i18n.core.types import LanguageCode, Locale, StringId
from catalog_i18n.exceptions import UnknownStringError
from catalog_i18n.locales.locale_parser import get_preferred_locales

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve string identifiers against the user's preferred languages.

    The primary table and the translation tables are sorted by language once.
    The preferred locales are then matched against that sequence, giving the
    indexes of the tables to consult, in priority order, before falling back
    to the primary table. Nothing changes after construction, so lookups can
    be made concurrently without locking.
    """

    __slots__ = ("_primary_table", "_tables", "_translation_indexes")

    def __init__(
        self,
        primary_table: StringTable,
        translation_tables: Iterable[StringTable],
        locales: Iterable[Locale],
    ) -> None:
        self._primary_table = primary_table
        self._tables = tuple(
            sorted(
                (primary_table, *translation_tables), key=lambda table: table.language
            )
        )

        languages = [table.language for table in self._tables]
        indexes: list[int] = []
        for locale in locales:
            start = bisect.bisect_left(languages, locale.language)
            end = bisect.bisect_right(languages, locale.language, lo=start)
            if start != end:
                indexes.append(start)
        self._translation_indexes = tuple(indexes)

        logger.debug(
            "Active languages: %s (primary: %s)",
            ", ".join(self.active_languages) or "none",
            primary_table.language,
        )

    @classmethod
    def from_catalogs(
        cls,
        catalogs: LoadedCatalogs,
        environ: Mapping[str, str] | None = None,
        max_locales: int | None = None,
    ) -> "Resolver":
        """Create a resolver using the locales configured in the environment.

        Args:
            catalogs: The loaded primary and translation catalogs.
            environ: Environment to read the locale variables from (default:
                the process environment).
            max_locales: Maximum number of preferred locales to consider
                (default: all of them). Unsupported languages count towards
                this limit.
        """
        locales = get_preferred_locales(environ, max_locales)
        logger.info(
            "Preferred locales: %s", ", ".join(map(str, locales)) or "none"
        )
        return cls(catalogs.primary.table, catalogs.translation_tables, locales)

    @property
    def primary_table(self) -> StringTable:
        """The table of the primary catalog."""
        return self._primary_table

    @property
    def tables(self) -> tuple[StringTable, ...]:
        """All tables, sorted by language."""
        return self._tables

    @property
    def translation_indexes(self) -> tuple[int, ...]:
        """Indexes in :attr:`tables` of the tables to consult, by priority."""
        return self._translation_indexes

    @property
    def active_languages(self) -> tuple[LanguageCode, ...]:
        """Languages of the tables consulted before the fallback, by priority."""
        return tuple(self._tables[index].language for index in self._translation_indexes)

    def find_string(self, string_id: StringId) -> str | None:
        """Return the text in the most preferred language, or None if unknown."""
        for index in self._translation_indexes:
            text = self._tables[index].lookup(string_id)
            if text is not None:
                return text
        return self._primary_table.lookup(string_id)

    def resolve_string(self, string_id: StringId) -> str:
        """Return the text in the most preferred language.

        Raises:
            UnknownStringError: If the primary catalog does not define the
                identifier.
        """
        text = self.find_string(string_id)
        if text is None:
            raise UnknownStringError(string_id)
        return text

    def identifier_exists(self, string_id: StringId) -> bool:
        """Check if the primary catalog defines the identifier."""
        return self._primary_table.lookup(string_id) is not None
