"""
Command-line interface for the status archive.

Usage:
    tweetstore tables                    List tables in the database
    tweetstore create TABLE              Create a status table
    tweetstore drop TABLE                Drop a table
    tweetstore import TABLE FILE         Archive statuses from a JSON / JSON-lines file
    tweetstore column TABLE FIELD        Print every value of one column
    tweetstore count TABLE               Print the number of rows
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from tweetstore.config import load_config, setup_logging
from tweetstore.persistence import ROW_COUNT_FAILED, StatusDatabase, StatusRecord

logger = logging.getLogger(__name__)


def cmd_tables(args: argparse.Namespace) -> int:
    """List the tables in the database."""
    for name in args.db.list_tables():
        print(name)
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    args.db.create_table(args.table)
    return 0


def cmd_drop(args: argparse.Namespace) -> int:
    args.db.drop_table(args.table)
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    """Archive statuses read from a file of API v1.1 payloads."""
    try:
        payloads = _read_payloads(Path(args.file))
        statuses = [StatusRecord.from_json(p) for p in payloads]
    except (OSError, ValueError) as e:
        logger.error(f"Could not read statuses from {args.file}: {e}")
        print(f"Error: {e}")
        return 1

    inserted = args.db.insert_statuses(statuses, args.table)
    print(f"Inserted {inserted} of {len(statuses)} statuses into {args.table}")
    return 0


def cmd_column(args: argparse.Namespace) -> int:
    for value in args.db.get_column(args.field, args.table):
        print("" if value is None else value)
    return 0


def cmd_count(args: argparse.Namespace) -> int:
    count = args.db.get_row_count(args.table)
    if count == ROW_COUNT_FAILED:
        print(f"Error: could not count rows in {args.table}")
        return 1
    print(count)
    return 0


def _read_payloads(path: Path) -> list[dict[str, Any]]:
    """Load a JSON array, a single JSON object, or one JSON object per line."""
    content = path.read_text(encoding="utf-8").strip()
    if not content:
        return []
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return [json.loads(line) for line in content.splitlines() if line.strip()]
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"expected a status object or a list of them, got {type(data).__name__}")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweetstore",
        description="tweetstore - archive Twitter statuses into relational tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level override",
    )
    parser.add_argument(
        "--database",
        "-d",
        type=str,
        default=None,
        help="Database name (SQLite: file path), overrides the configured one",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    tables_parser = subparsers.add_parser("tables", help="List tables")
    tables_parser.set_defaults(func=cmd_tables)

    create_parser = subparsers.add_parser("create", help="Create a status table")
    create_parser.add_argument("table", help="Table name")
    create_parser.set_defaults(func=cmd_create)

    drop_parser = subparsers.add_parser("drop", help="Drop a table")
    drop_parser.add_argument("table", help="Table name")
    drop_parser.set_defaults(func=cmd_drop)

    import_parser = subparsers.add_parser(
        "import", help="Archive statuses from a JSON or JSON-lines file"
    )
    import_parser.add_argument("table", help="Table name")
    import_parser.add_argument("file", help="File of Twitter API v1.1 status objects")
    import_parser.set_defaults(func=cmd_import)

    column_parser = subparsers.add_parser("column", help="Print every value of a column")
    column_parser.add_argument("table", help="Table name")
    column_parser.add_argument("field", help="Column name, e.g. editedText")
    column_parser.set_defaults(func=cmd_column)

    count_parser = subparsers.add_parser("count", help="Print the number of rows")
    count_parser.add_argument("table", help="Table name")
    count_parser.set_defaults(func=cmd_count)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config and set up logging
    config = load_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    if args.command is None:
        parser.print_help()
        return 1

    args.db = StatusDatabase(args.database or config.database.database, config.database)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
