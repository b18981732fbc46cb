"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import SecretStr

from redlist_ids import __version__
from redlist_ids.coerce import as_iucn
from redlist_ids.config import get_settings
from redlist_ids.errors import RedListError
from redlist_ids.flows.resolve import resolve_all
from redlist_ids.logging import configure_logging
from redlist_ids.resolve import get_iucn
from redlist_ids.schemas import TABLE_COLUMNS, IucnIds


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="redlist-ids",
        description="Resolve taxon names to IUCN Red List identifiers",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )
    parser.add_argument(
        "--key",
        type=str,
        default=None,
        help="Red List API token (default: IUCN_REDLIST_KEY from the environment)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve names to Red List ids")
    resolve_parser.add_argument("names", nargs="+", help="Common or scientific names")
    resolve_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't report progress",
    )

    coerce_parser = subparsers.add_parser("coerce", help="Coerce Red List ids")
    coerce_parser.add_argument("ids", nargs="+", help="Red List taxon ids")
    coerce_parser.add_argument(
        "--no-check",
        dest="check",
        action="store_false",
        help="Trust the ids without contacting the Red List",
    )

    batch_parser = subparsers.add_parser("batch", help="Resolve a file of names to JSON")
    batch_parser.add_argument("names_file", type=Path, help="File with one name per line")
    batch_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("iucn_ids.json"),
        help="Output JSON path (default: iucn_ids.json)",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def print_table(ids: IucnIds) -> None:
    """Print the identifier table as tab-separated rows."""
    columns = ids.to_table().to_columns()
    print("\t".join(TABLE_COLUMNS))
    for i in range(len(ids)):
        cells = [columns[c][i] for c in TABLE_COLUMNS]
        print("\t".join("NA" if v is None else str(v) for v in cells))


def cmd_resolve(args: argparse.Namespace) -> int:
    """Handle the 'resolve' command."""
    try:
        ids = get_iucn(args.names, key=args.key, verbose=not args.quiet)
    except RedListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print_table(ids)
    return 0


def cmd_coerce(args: argparse.Namespace) -> int:
    """Handle the 'coerce' command."""
    try:
        ids = as_iucn(args.ids, check=args.check, key=args.key)
    except RedListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print_table(ids)
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    """Handle the 'batch' command: resolve a names file via the Prefect flow."""
    if not args.names_file.exists():
        print(f"Names file not found: {args.names_file}", file=sys.stderr)
        return 1
    key = SecretStr(args.key) if args.key else None
    try:
        result = resolve_all(args.names_file, args.output, key=key)
    except RedListError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Resolved {result['names']} names ({result['found']} found) -> {result['output']}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"API: {settings.api_base}")
    print(f"API key configured: {'yes' if settings.api_key else 'no'}")
    print(f"Debug: {settings.debug}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    level = logging.DEBUG if args.debug or settings.debug else settings.log_level
    configure_logging(level=level, force=True)

    commands = {
        "resolve": cmd_resolve,
        "coerce": cmd_coerce,
        "batch": cmd_batch,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
