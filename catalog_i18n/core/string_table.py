"""Module for the StringTable class."""
import bisect
from typing import Iterable, Iterator

from catalog_i18n.core.types import LanguageCode, StringId, StringResource
from catalog_i18n.exceptions import CatalogFormatError


class StringTable:
    """An immutable table of string resources for one language.

    Resources are kept sorted by identifier so that a lookup is a binary
    search over the identifiers.
    """

    __slots__ = ("_language", "_resources", "_ids")

    def __init__(
        self, language: LanguageCode, resources: Iterable[StringResource] = ()
    ) -> None:
        """Initialize the table from resources already sorted by identifier.

        Raises:
            CatalogFormatError: If the resources are not sorted or an
                identifier appears more than once.
        """
        self._language = language
        self._resources = tuple(resources)
        self._ids = tuple(resource.id for resource in self._resources)
        for previous, current in zip(self._ids, self._ids[1:]):
            if previous == current:
                raise CatalogFormatError(
                    f"duplicate string identifier: `{current}`", language=language
                )
            if previous > current:
                raise CatalogFormatError(
                    f"string resources are not sorted: `{previous}` > `{current}`",
                    language=language,
                )

    @classmethod
    def from_resources(
        cls, language: LanguageCode, resources: Iterable[StringResource]
    ) -> "StringTable":
        """Build a table from resources in any order."""
        return cls(language, sorted(resources, key=lambda resource: resource.id))

    @property
    def language(self) -> LanguageCode:
        """The language of the table."""
        return self._language

    @property
    def resources(self) -> tuple[StringResource, ...]:
        """The resources, sorted by identifier."""
        return self._resources

    @property
    def ids(self) -> tuple[StringId, ...]:
        """The sorted identifiers."""
        return self._ids

    def lookup(self, string_id: StringId) -> str | None:
        """Return the text for the identifier, or None if the table lacks it."""
        index = bisect.bisect_left(self._ids, string_id)
        if index != len(self._ids) and self._ids[index] == string_id:
            return self._resources[index].content
        return None

    def __contains__(self, string_id: object) -> bool:
        return isinstance(string_id, str) and self.lookup(string_id) is not None

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[StringId]:
        return iter(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringTable):
            return NotImplemented
        return (self._language, self._resources) == (
            other.language,
            other.resources,
        )

    def __hash__(self) -> int:
        return hash((self._language, self._resources))

    def __repr__(self) -> str:
        return f"StringTable(language={self._language!r}, size={len(self)})"
