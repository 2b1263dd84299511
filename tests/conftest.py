"""Shared fixtures for catalog_i18n tests."""

from pathlib import Path
from typing import Callable, Iterator

import pytest

from catalog_i18n import strings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CatalogWriter = Callable[[dict[str, str]], Path]


@pytest.fixture(name="resource_root")
def resource_root_fixture() -> Path:
    """Return the resource root of the en/de/ja fixture catalogs.

    - en (primary): greeting, yes, no
    - de: yes -> "ja"
    - ja: greeting -> "今日は"
    """
    return FIXTURES_DIR / "resources"


@pytest.fixture(name="write_catalogs")
def write_catalogs_fixture(tmp_path: Path) -> CatalogWriter:
    """Return a function writing catalog files under a temporary resource root.

    Keys are file names inside the ``i18n`` directory, values are the XML
    documents. The function returns the resource root.
    """

    def write(files: dict[str, str]) -> Path:
        catalog_dir = tmp_path / "i18n"
        catalog_dir.mkdir(exist_ok=True)
        for name, document in files.items():
            (catalog_dir / name).write_text(document, encoding="utf-8")
        return tmp_path

    return write


@pytest.fixture(autouse=True)
def reset_strings() -> Iterator[None]:
    """Forget the process-wide string resources around each test."""
    strings.reset()
    yield
    strings.reset()
