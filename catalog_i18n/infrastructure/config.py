"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from catalog_i18n.exceptions import ConfigError

LOG_DIRECTORY_NAME = "catalog-i18n"
LOG_FILE_NAME = "catalog-i18n.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Config:
    """A class to store the configuration."""

    def __init__(self) -> None:
        # Directory containing the i18n catalog directory
        self.resource_root = Path(".")
        # None means one locale per available table
        self.max_locales: int | None = None
        self.log_references = False
        # logging.config.dictConfig schema
        self.logging_config: dict[str, Any] | None = None

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
        if not isinstance(config, dict):
            raise ConfigError(f"Configuration must be a mapping: {yaml_path}")

        if (resource_root := config.get("resource_root")) is not None:
            # Relative paths are relative to the configuration file
            self.resource_root = yaml_path.parent / Path(resource_root)
        if (max_locales := config.get("max_locales")) is not None:
            if not isinstance(max_locales, int) or max_locales < 0:
                raise ConfigError(f"Invalid max_locales: {max_locales!r}")
            self.max_locales = max_locales
        self.log_references = bool(config.get("log_references", self.log_references))
        if (logging_config := config.get("logging")) is not None:
            if not isinstance(logging_config, dict):
                raise ConfigError("The logging section must be a mapping")
            self.logging_config = logging_config

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix in (".yaml", ".yml"):
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    def setup_logging(self) -> None:
        """Configure logging from the configuration.

        Without a logging section, logs go to a file in
        ``~/.local/share/catalog-i18n``. An invalid logging section falls
        back to a basic console configuration.
        """
        if self.logging_config is None:
            log_directory = Path.home() / ".local" / "share" / LOG_DIRECTORY_NAME
            log_directory.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_directory / LOG_FILE_NAME,
                level=logging.INFO,
                format=LOG_FORMAT,
            )
            return

        try:
            logging.config.dictConfig(self.logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
            logging.getLogger(__name__).warning(
                "Invalid logging configuration, using defaults: %s", e
            )
