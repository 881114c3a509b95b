"""Command-line entry point for `ag-csharp`.

Usage:
    ag-csharp init [--force]
    ag-csharp update [--backup]
    ag-csharp list [--rules] [--skills] [--workflows]
    ag-csharp validate
    ag-csharp version
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from ag_csharp.commands import COMMAND_NAME, COMMANDS, CommandContext
from ag_csharp.config import load_settings
from ag_csharp.console import make_console
from ag_csharp.logging_utils import configure_logging
from ag_csharp.templates import default_store

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ag_csharp.templates import ResourceStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=COMMAND_NAME,
        description=(
            "Antigravity C# Backend Developer Kit - "
            "Initialize .agent configuration for AI-assisted development"
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log extraction details to stderr"
    )
    parser.add_argument(
        "-C",
        "--directory",
        type=Path,
        help="Project directory to operate in (default: current directory)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    for command in COMMANDS:
        command.register(subparsers)
    return parser


def main(argv: Sequence[str] | None = None, *, store: ResourceStore | None = None) -> int:
    """Run one subcommand and return its exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.verbose else settings.log_level)
    project_dir = args.directory if args.directory is not None else Path(settings.project_dir)
    context = CommandContext(
        console=make_console(no_color=settings.no_color),
        project_dir=project_dir.expanduser().resolve(),
        agent_dir_name=settings.agent_dir_name,
        store=store if store is not None else default_store(),
    )
    return args.handler(args, context)


if __name__ == "__main__":
    sys.exit(main())
