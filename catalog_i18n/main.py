"""Command line interface for catalog-i18n."""
import argparse
import logging
import sys
from pathlib import Path

from catalog_i18n.catalog.catalog_loader import load_catalogs
from catalog_i18n.codegen import write_accessors
from catalog_i18n.exceptions import CatalogI18nError
from catalog_i18n.infrastructure.config import Config
from catalog_i18n.locales.locale_parser import (
    LOCALE_ENVIRONMENT_VARIABLES,
    get_preferred_locales,
    read_locale_environment,
)
from catalog_i18n.strings import Strings, initialize

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.
    """
    parser = argparse.ArgumentParser(
        prog="catalog-i18n", description="XML string catalogs"
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file",
        type=Path,
    )
    parser.add_argument(
        "-r",
        "--root",
        help="Resource root containing the i18n directory (overrides the config)",
        type=Path,
    )
    sub_parser = parser.add_subparsers(dest="command", required=True)

    sub_parser.add_parser("check", help="Validate the primary and translation catalogs")
    sub_parser.add_parser("locales", help="Show the preferred and active languages")
    sub_parser.add_parser("list", help="List every string in the preferred language")

    lookup_parser = sub_parser.add_parser("lookup", help="Resolve a string identifier")
    lookup_parser.add_argument("identifier", help="Identifier of the string")

    generate_parser = sub_parser.add_parser(
        "generate", help="Generate a module with one accessor per string"
    )
    generate_parser.add_argument("output", help="Path of the module to write", type=Path)
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from the config file and the command line."""
    config = Config()
    if args.config is not None:
        if not args.config.exists():
            raise FileNotFoundError(f"Config file not found: {args.config}")
        config.parse(args.config)
        config.setup_logging()
    if args.root is not None:
        config.resource_root = args.root
    return config


def initialize_strings(config: Config) -> Strings:
    """Initialize the process-wide string resources from the configuration."""
    return initialize(
        config.resource_root,
        max_locales=config.max_locales,
        log_references=config.log_references,
    )


def handle_check_command(config: Config) -> None:
    """Handle the check command."""
    catalogs = load_catalogs(config.resource_root)
    primary = catalogs.primary.table
    print(f"Primary catalog: {primary.language} ({len(primary)} strings)")
    for table in catalogs.translation_tables:
        print(f"Translation: {table.language} ({len(table)}/{len(primary)} strings)")


def handle_locales_command(config: Config, strings: Strings) -> None:
    """Handle the locales command."""
    for name, value in zip(LOCALE_ENVIRONMENT_VARIABLES, read_locale_environment()):
        print(f"{name}={value or ''}")
    locales = get_preferred_locales(max_locales=config.max_locales)
    print("Preferred locales:", ", ".join(map(str, locales)) or "none")
    print(
        "Active languages:",
        ", ".join(strings.resolver.active_languages) or "none",
    )
    print("Primary language:", strings.resolver.primary_table.language)


def handle_list_command(strings: Strings) -> None:
    """Handle the list command."""
    for string_id in strings:
        print(f"{string_id}\t{strings[string_id]}")


def handle_lookup_command(strings: Strings, identifier: str) -> None:
    """Handle the lookup command."""
    print(strings[identifier])


def handle_generate_command(config: Config, output: Path) -> None:
    """Handle the generate command."""
    catalogs = load_catalogs(config.resource_root)
    write_accessors(catalogs.primary.table, output)
    print(f"Wrote {len(catalogs.primary.table)} accessors to {output}")


def main(argv: list[str] | None = None) -> None:
    """
    Command Line Interface for catalog-i18n.
    Several commands are available:
    - check: Validate the catalogs
    - locales: Show the preferred and active languages
    - list: List every string
    - lookup: Resolve one string
    - generate: Generate the accessor module
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
        match args.command:
            case "check":
                handle_check_command(config)
            case "generate":
                handle_generate_command(config, args.output)
            case "locales":
                handle_locales_command(config, initialize_strings(config))
            case "list":
                handle_list_command(initialize_strings(config))
            case "lookup":
                handle_lookup_command(initialize_strings(config), args.identifier)
    except (CatalogI18nError, FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
