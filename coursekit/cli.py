"""Command line tool for managing course categories."""

from __future__ import annotations

import argparse
import sqlite3
import sys

from coursekit.catalog import CategoryDB, create_schema

DEFAULT_DATABASE = "./data.db"


def open_database(path: str) -> sqlite3.Connection:
    """Open the SQLite database at ``path``, creating its tables if needed."""
    connection = sqlite3.connect(path)
    create_schema(connection)
    return connection


def _run_create(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if (args.name is None) != (args.description is None):
        missing = "description" if args.description is None else "name"
        parser.error(
            "if any flags in the group [name description] are set they must all be set; "
            f"missing [{missing}]"
        )
    connection = open_database(args.database)
    try:
        CategoryDB(connection).create(args.name or "", args.description or "")
    except sqlite3.Error as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    finally:
        connection.close()
    return 0


def _run_list(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    print("list called")
    connection = open_database(args.database)
    try:
        categories = CategoryDB(connection).find_all()
    except sqlite3.Error as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    finally:
        connection.close()
    for category in categories:
        print(f"{category.id} {category.name} {category.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its category sub-commands."""
    parser = argparse.ArgumentParser(prog="coursekit", description="Manage course categories.")
    parser.add_argument(
        "--database", default=DEFAULT_DATABASE, help="SQLite database file (default: %(default)s)"
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command")

    category = commands.add_parser("category", help="Work with categories")
    category_commands = category.add_subparsers(dest="category_command")
    category.set_defaults(help_parser=category)

    create = category_commands.add_parser(
        "create", help="Create a new category", description="Create a new category"
    )
    create.add_argument("-n", "--name", help="Name of the category")
    create.add_argument("-d", "--description", help="Description of the category")
    create.set_defaults(run=_run_create, command_parser=create)

    listing = category_commands.add_parser("list", help="List categories")
    listing.set_defaults(run=_run_list, command_parser=listing)

    parser.set_defaults(help_parser=parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    run = getattr(args, "run", None)
    if run is None:
        args.help_parser.print_help()
        return 0
    return run(args, args.command_parser)


if __name__ == "__main__":
    raise SystemExit(main())