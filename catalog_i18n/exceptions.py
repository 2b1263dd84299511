"""Custom exception hierarchy for catalog_i18n."""

from pathlib import Path


class CatalogI18nError(Exception):
    """Base exception for all catalog_i18n errors."""


class CatalogFormatError(CatalogI18nError):
    """A catalog document is malformed or fails validation."""

    def __init__(self, message: str, *, language: str | None = None) -> None:
        if language:
            message = f"catalog `{language}`: {message}"
        super().__init__(message)
        self.language = language


class CatalogNotFoundError(CatalogFormatError):
    """A catalog file declared or required by the primary catalog is missing."""

    def __init__(self, path: Path, *, language: str | None = None) -> None:
        super().__init__(f"catalog file not found: {path}", language=language)
        self.path = path


class UnknownStringError(CatalogI18nError, KeyError):
    """The identifier is not defined in the primary catalog."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"unknown string identifier: {identifier!r}")
        self.identifier = identifier

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class StringsNotInitializedError(CatalogI18nError):
    """The string resources were accessed before initialization."""

    def __init__(self) -> None:
        super().__init__(
            "String resources are not initialized. Call initialize() first."
        )


class StringsAlreadyInitializedError(CatalogI18nError):
    """The string resources were initialized a second time."""

    def __init__(self) -> None:
        super().__init__("String resources are already initialized.")


class ConfigError(CatalogI18nError):
    """The configuration file is invalid."""
