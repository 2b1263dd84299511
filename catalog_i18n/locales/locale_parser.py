"""Parse the user's preferred locales from POSIX/gettext environment variables.

The variables are consulted in this order and the first non-empty one wins:

- ``LANGUAGE``: colon-separated priority list (gettext extension)
- ``LC_ALL``
- ``LC_MESSAGES``
- ``LANG``

A value of ``C`` disables internationalization, as does a ``LANG`` value
that is a path to a locale file.
"""
import logging
import os
from typing import Mapping, Sequence

from catalog_i18n.core.types import Locale, is_language_code

logger = logging.getLogger(__name__)

LOCALE_ENVIRONMENT_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
"""Environment variables holding locale preferences, sorted by priority."""

C_LOCALE = "C"
LOCALE_SEPARATOR = ":"


def read_locale_environment(
    environ: Mapping[str, str] | None = None,
) -> list[str | None]:
    """Return the raw locale variables, sorted by priority."""
    if environ is None:
        environ = os.environ
    return [environ.get(name) for name in LOCALE_ENVIRONMENT_VARIABLES]


def parse_locale_spec(spec: str) -> Locale | None:
    """Parse one ``language[_country][.encoding][@variant]`` specification.

    Returns:
        The locale, or None if the language part is empty or not alphabetic.
    """
    variant = encoding = country = None

    spec, sep, tail = spec.rpartition("@")
    if sep:
        variant = tail
    else:
        spec = tail

    spec, sep, tail = spec.rpartition(".")
    if sep:
        encoding = tail
    else:
        spec = tail

    language, sep, tail = spec.rpartition("_")
    if sep:
        country = tail
    else:
        language = tail

    if not is_language_code(language):
        return None
    return Locale(language, country, encoding, variant)


def parse_locale_preferences(
    candidates: Sequence[str | None], max_locales: int | None = None
) -> tuple[Locale, ...]:
    """Parse the preferred locales from raw variable values.

    Args:
        candidates: Raw values sorted by priority; the last one is the base
            variable (``LANG``). None stands for an unset variable.
        max_locales: Maximum number of locales to return.

    Returns:
        The preferred locales, one per language, in priority order. Empty if
        internationalization is disabled or nothing is configured.
    """
    base_index = len(candidates) - 1
    chosen = next(
        (
            (index, value)
            for index, value in enumerate(
                (candidate or "").strip() for candidate in candidates
            )
            if value
        ),
        None,
    )
    if chosen is None:
        return ()

    index, value = chosen
    if value == C_LOCALE or (index == base_index and value.startswith("/")):
        logger.debug("Internationalization disabled by locale %r", value)
        return ()

    locales: list[Locale] = []
    languages: set[str] = set()
    for spec in value.split(LOCALE_SEPARATOR):
        locale = parse_locale_spec(spec)
        if locale is None:
            logger.debug("Ignoring invalid locale specification %r", spec)
            continue
        if locale.language in languages:
            continue
        languages.add(locale.language)
        locales.append(locale)

    if max_locales is not None:
        del locales[max_locales:]
    return tuple(locales)


def get_preferred_locales(
    environ: Mapping[str, str] | None = None, max_locales: int | None = None
) -> tuple[Locale, ...]:
    """Return the preferred locales configured in the environment."""
    return parse_locale_preferences(read_locale_environment(environ), max_locales)
