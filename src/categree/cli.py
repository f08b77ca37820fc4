"""
categree.cli - Command-line interface.

Main entry point for the categree CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import argcomplete

from categree import __version__
from categree.commands import (
    completion,
    config_cmd,
    init,
    labels_cmd,
    orphans_cmd,
    path_cmd,
    sort_cmd,
)
from categree.core.errors import CategreeError


def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        type=Path,
        help="Category list (.json or .csv)",
        metavar="FILE",
    )


def _add_root_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        type=int,
        help="Parent id whose children form the top level (default from config: 0)",
        metavar="ID",
    )


def _add_language_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        type=int,
        help="Language id for localized names",
        metavar="ID",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="categree",
        description="Category hierarchy sequencing and display tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  categree sort categories.json              # Tree order, orphans last
  categree sort categories.csv --format json # Tree order as JSON
  categree labels categories.json            # Indented labels
  categree path categories.json 42           # Breadcrumb of category 42
  categree orphans categories.json           # Categories outside the tree

Configuration:
  categree init                  # Create .categree.toml in current directory
  categree config path           # Show config file location
  categree config show           # View all settings

For detailed command help: categree <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"categree {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sort command
    sort_parser = subparsers.add_parser(
        "sort",
        help="Sort a flat category list into tree order",
    )
    _add_file_argument(sort_parser)
    _add_root_argument(sort_parser)
    sort_parser.add_argument(
        "--ignore-orphans",
        action="store_true",
        help="Drop categories whose parent is not in the list",
    )
    sort_parser.add_argument(
        "--format",
        choices=sorted(sort_cmd.RENDERERS),
        default="text",
        help="Output format (default: text)",
    )

    # labels command
    labels_parser = subparsers.add_parser(
        "labels",
        help="Print indented category labels",
    )
    _add_file_argument(labels_parser)
    labels_parser.add_argument(
        "--indent",
        help='Indent string repeated per level (default from config: "--")',
        metavar="STR",
    )
    _add_language_argument(labels_parser)
    labels_parser.add_argument(
        "--no-alias",
        action="store_true",
        help="Do not append aliases",
    )

    # path command
    path_parser = subparsers.add_parser(
        "path",
        help="Print the breadcrumb path of a category",
    )
    _add_file_argument(path_parser)
    path_parser.add_argument(
        "category_id",
        type=int,
        help="Category id",
        metavar="ID",
    )
    _add_language_argument(path_parser)
    path_parser.add_argument(
        "--alias-pattern",
        help='Label pattern for aliased categories, e.g. "{name} ({alias})"',
        metavar="PATTERN",
    )
    path_parser.add_argument(
        "--separator",
        help="String between breadcrumb labels",
        metavar="STR",
    )

    # orphans command
    orphans_parser = subparsers.add_parser(
        "orphans",
        help="Report categories whose parent is missing or cyclic",
    )
    _add_file_argument(orphans_parser)
    _add_root_argument(orphans_parser)

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="Create .categree.toml configuration",
    )
    init_parser.add_argument(
        "--name",
        help="Project name (default: directory name)",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing configuration",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="View configuration",
    )
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["show", "path"],
        help="show: print effective settings; path: print config file location",
    )

    # completion command
    completion_parser = subparsers.add_parser(
        "completion",
        help="Shell tab-completion setup",
    )
    completion_parser.add_argument(
        "--shell",
        choices=list(completion.SHELLS),
        help="Print the completion script for this shell",
    )

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Route library log records to stderr according to -v/-q."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Activate with: eval "$(register-python-argcomplete categree)"
    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)
    configure_logging(args)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        # Dispatch to command handlers
        if args.command == "sort":
            return sort_cmd.run(args)
        elif args.command == "labels":
            return labels_cmd.run(args)
        elif args.command == "path":
            return path_cmd.run(args)
        elif args.command == "orphans":
            return orphans_cmd.run(args)
        elif args.command == "init":
            return init.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "completion":
            return completion.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except (CategreeError, OSError) as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
