"""Tests for the Config class."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from catalog_i18n.exceptions import ConfigError
from catalog_i18n.infrastructure.config import Config


@pytest.fixture
def full_config_yaml(tmp_path: Path) -> Path:
    """Create a YAML config file with all fields."""
    config = {
        "resource_root": "resources",
        "max_locales": 3,
        "log_references": True,
        "logging": {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                }
            },
            "root": {"level": "DEBUG", "handlers": ["console"]},
        },
    }
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(config), encoding="utf-8")
    return config_path


class TestConfigDefaults:
    """Tests for Config default values."""

    def test_defaults(self) -> None:
        """Test the default values."""
        config = Config()
        assert config.resource_root == Path(".")
        assert config.max_locales is None
        assert config.log_references is False
        assert config.logging_config is None


class TestConfigParseYaml:
    """Tests for YAML config file parsing."""

    def test_parse_full_config(self, full_config_yaml: Path, tmp_path: Path) -> None:
        """Test parsing a config with all fields set."""
        config = Config()
        config.parse(full_config_yaml)

        assert config.resource_root == tmp_path / "resources"
        assert config.max_locales == 3
        assert config.log_references is True
        assert config.logging_config is not None
        assert config.logging_config["version"] == 1

    def test_absolute_resource_root(self, tmp_path: Path) -> None:
        """Absolute resource roots are kept as is."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            yaml.dump({"resource_root": "/opt/app/resources"}), encoding="utf-8"
        )
        config = Config()
        config.parse(config_path)
        assert config.resource_root == Path("/opt/app/resources")

    def test_empty_file_keeps_defaults(self, tmp_path: Path) -> None:
        """An empty file keeps every default."""
        config_path = tmp_path / "config.yml"
        config_path.write_text("", encoding="utf-8")
        config = Config()
        config.parse(config_path)
        assert config.resource_root == Path(".")
        assert config.max_locales is None

    @pytest.mark.parametrize(
        "content,message",
        [
            ("- a\n- b\n", "must be a mapping"),
            ("max_locales: -1\n", "Invalid max_locales"),
            ("max_locales: many\n", "Invalid max_locales"),
            ("logging: verbose\n", "logging section must be a mapping"),
        ],
    )
    def test_invalid_config(self, tmp_path: Path, content: str, message: str) -> None:
        """Invalid values raise ConfigError."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError, match=message):
            Config().parse(config_path)

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"], ids=["yaml", "yml"])
    def test_yaml_suffixes(self, tmp_path: Path, suffix: str) -> None:
        """Both YAML suffixes are accepted."""
        config_path = tmp_path / f"config{suffix}"
        config_path.write_text("max_locales: 2\n", encoding="utf-8")
        config = Config()
        config.parse(config_path)
        assert config.max_locales == 2

    def test_parse_unsupported_format_raises(self, tmp_path: Path) -> None:
        """Test that parsing a non-YAML file raises ValueError."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{}")

        config = Config()
        with pytest.raises(ValueError, match="Unsupported file format: '.json'"):
            config.parse(config_path)


class TestConfigSetupLogging:
    """Tests for the setup_logging method."""

    def test_setup_logging_default(self, tmp_path: Path) -> None:
        """Test that default logging writes to a file in .local/share."""
        config = Config()

        with patch("catalog_i18n.infrastructure.config.Path.home") as mock_home, patch(
            "catalog_i18n.infrastructure.config.logging.basicConfig"
        ) as mock_basic_config:
            mock_home.return_value = tmp_path
            config.setup_logging()

        log_dir = tmp_path / ".local" / "share" / "catalog-i18n"
        assert log_dir.exists()
        assert mock_basic_config.call_args.kwargs["filename"] == (
            log_dir / "catalog-i18n.log"
        )

    def test_setup_logging_with_valid_dictconfig(self, full_config_yaml: Path) -> None:
        """Test that valid logging dictConfig is applied."""
        config = Config()
        config.parse(full_config_yaml)

        with patch(
            "catalog_i18n.infrastructure.config.logging.config.dictConfig"
        ) as mock_dict_config:
            config.setup_logging()

        mock_dict_config.assert_called_once_with(config.logging_config)

    def test_setup_logging_with_invalid_dictconfig(self) -> None:
        """Test that invalid logging config falls back to basic config."""
        config = Config()
        config.logging_config = {"invalid": "config"}

        with patch(
            "catalog_i18n.infrastructure.config.logging.basicConfig"
        ) as mock_basic_config:
            # Should not raise
            config.setup_logging()

        mock_basic_config.assert_called_once()
        assert logging.getLogger().level is not None
