"""Process-wide access to the string resources.

Call :func:`initialize` once at startup, before any string is accessed::

    from catalog_i18n.strings import get_strings, initialize

    initialize(Path("resources"))
    print(get_strings().hello_world)

Initialization loads and validates every catalog, reads the locale
preferences from the environment and freezes the result. Afterwards,
lookups only read immutable data and need no locking.
"""
import logging
import sys
import threading
from pathlib import Path
from typing import Iterator, Mapping

from catalog_i18n.catalog.catalog_loader import load_catalogs
from catalog_i18n.core.types import StringId
from catalog_i18n.exceptions import (
    CatalogFormatError,
    StringsAlreadyInitializedError,
    StringsNotInitializedError,
    UnknownStringError,
)
from catalog_i18n.resolver.resolver import Resolver

logger = logging.getLogger(__name__)


class Strings:
    """Read-only accessors for the string resources.

    ``strings.greeting`` and ``strings["greeting"]`` both return the text of
    the ``greeting`` resource in the user's preferred language.
    """

    __slots__ = ("_resolver", "_log_references")

    def __init__(self, resolver: Resolver, log_references: bool = False) -> None:
        # Attribute access would never reach __getattr__ for these
        members = {name for name in dir(type(self)) if not name.startswith("_")}
        shadowed = [
            string_id for string_id in resolver.primary_table if string_id in members
        ]
        if shadowed:
            raise CatalogFormatError(
                "string identifiers clash with Strings members: "
                + ", ".join(f"`{string_id}`" for string_id in shadowed),
                language=resolver.primary_table.language,
            )
        object.__setattr__(self, "_resolver", resolver)
        object.__setattr__(self, "_log_references", log_references)

    @property
    def resolver(self) -> Resolver:
        """The resolver backing the accessors."""
        return self._resolver

    def _log_reference(self, string_id: StringId) -> None:
        # Skip this frame and the accessor calling it
        frame = sys._getframe(2)  # pylint: disable=protected-access
        logger.debug(
            "i18n %s(%d): %s", frame.f_code.co_filename, frame.f_lineno, string_id
        )

    def identifier_exists(self, string_id: StringId) -> bool:
        """Check if the primary catalog defines the identifier."""
        return self._resolver.identifier_exists(string_id)

    def __getattr__(self, name: str) -> str:
        # Only called for names that are not slots, methods or properties
        if name.startswith("_") or not self._resolver.identifier_exists(name):
            raise AttributeError(f"unknown string identifier: {name!r}")
        if self._log_references:
            self._log_reference(name)
        return self._resolver.resolve_string(name)

    def __getitem__(self, string_id: StringId) -> str:
        if self._log_references:
            self._log_reference(string_id)
        return self._resolver.resolve_string(string_id)

    def __contains__(self, string_id: object) -> bool:
        return isinstance(string_id, str) and self.identifier_exists(string_id)

    def __iter__(self) -> Iterator[StringId]:
        return iter(self._resolver.primary_table)

    def __len__(self) -> int:
        return len(self._resolver.primary_table)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __dir__(self) -> list[str]:
        accessors = (
            string_id
            for string_id in self
            if string_id.isidentifier() and not string_id.startswith("_")
        )
        return sorted({*super().__dir__(), *accessors})


_lock = threading.Lock()
_strings: Strings | None = None


def initialize(
    resource_root: Path,
    environ: Mapping[str, str] | None = None,
    max_locales: int | None = None,
    log_references: bool = False,
) -> Strings:
    """Load the catalogs and choose the languages, once per process.

    Args:
        resource_root: Directory containing the ``i18n`` catalog directory.
        environ: Environment to read the locale variables from (default:
            the process environment).
        max_locales: Maximum number of preferred locales to consider.
        log_references: Log every string access with its caller location.

    Returns:
        The initialized string resources.

    Raises:
        StringsAlreadyInitializedError: If called more than once.
        CatalogFormatError: If a catalog is missing, malformed or invalid,
            or if a string identifier clashes with a :class:`Strings` member.
    """
    global _strings  # pylint: disable=global-statement
    with _lock:
        if _strings is not None:
            raise StringsAlreadyInitializedError()
        resolver = Resolver.from_catalogs(
            load_catalogs(resource_root), environ, max_locales
        )
        _strings = Strings(resolver, log_references)
        logger.info(
            "String resources initialized from %s (%d strings)",
            resource_root,
            len(_strings),
        )
        return _strings


def is_initialized() -> bool:
    """Check if :func:`initialize` has completed."""
    return _strings is not None


def get_strings() -> Strings:
    """Return the string resources.

    Raises:
        StringsNotInitializedError: If :func:`initialize` has not completed.
    """
    strings = _strings
    if strings is None:
        raise StringsNotInitializedError()
    return strings


def resolve_string(string_id: StringId) -> str:
    """Return the text of a string resource in the preferred language."""
    return get_strings().resolver.resolve_string(string_id)


def identifier_exists(string_id: StringId) -> bool:
    """Check if the primary catalog defines the identifier."""
    return get_strings().identifier_exists(string_id)


def reset() -> None:
    """Forget the initialized string resources. Meant for tests only."""
    global _strings  # pylint: disable=global-statement
    with _lock:
        _strings = None


__all__ = [
    "Strings",
    "UnknownStringError",
    "get_strings",
    "identifier_exists",
    "initialize",
    "is_initialized",
    "reset",
    "resolve_string",
]
