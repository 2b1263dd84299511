"""Generate a Python module with one accessor function per string identifier.

Generated accessors turn a misspelled identifier into an import or lint
error instead of a runtime lookup failure::

    from myapp.generated_strings import greeting

    print(greeting())
"""
import keyword
import logging
from pathlib import Path

from catalog_i18n.core.string_table import StringTable
from catalog_i18n.exceptions import CatalogFormatError

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset({"IDENTIFIERS", "LANGUAGE", "get_strings"})
"""Module-level names used by the generated module itself."""

_HEADER = '''"""String resource accessors generated by catalog-i18n. Do not edit.

Primary language: {language}
"""
from catalog_i18n.strings import get_strings

LANGUAGE = {language!r}

IDENTIFIERS = frozenset(
    {{
{identifiers}
    }}
)
'''

_ACCESSOR = '''

def {name}() -> str:
    """Return the ``{name}`` string resource."""
    return get_strings().resolver.resolve_string({name!r})
'''


def check_identifier(string_id: str, language: str | None = None) -> None:
    """Check that an identifier can be the name of a generated accessor.

    Raises:
        CatalogFormatError: If the identifier is not a valid Python name.
    """
    if not string_id.isidentifier() or keyword.iskeyword(string_id):
        raise CatalogFormatError(
            f"string identifier is not a valid Python name: `{string_id}`",
            language=language,
        )
    if string_id in RESERVED_NAMES or string_id.startswith("_"):
        raise CatalogFormatError(
            f"string identifier is reserved: `{string_id}`", language=language
        )


def generate_accessors(table: StringTable) -> str:
    """Return the source of the accessor module for the primary table."""
    for string_id in table:
        check_identifier(string_id, table.language)

    source = _HEADER.format(
        language=table.language,
        identifiers="\n".join(f"        {string_id!r}," for string_id in table),
    )
    return source + "".join(_ACCESSOR.format(name=string_id) for string_id in table)


def write_accessors(table: StringTable, output_path: Path) -> Path:
    """Write the accessor module for the primary table.

    Returns:
        The path of the written module.
    """
    source = generate_accessors(table)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(source, encoding="utf-8")
    logger.info("Wrote %d string accessors to %s", len(table), output_path)
    return output_path
