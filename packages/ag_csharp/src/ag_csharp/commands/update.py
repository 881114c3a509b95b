"""`update`: replace an existing `.agent` folder with the bundled templates."""

from __future__ import annotations

import argparse

from ag_csharp.commands.context import (
    COMMAND_NAME,
    KIT_NAME,
    CommandContext,
    known_categories,
    print_skipped,
)
from ag_csharp.console import print_banner, print_error, print_success, print_warning
from ag_csharp.templates import backup_agent_dir, backup_path_for, install_templates


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "update",
        help="Update existing .agent folder with latest templates",
        description="Update existing .agent folder with latest templates",
    )
    parser.add_argument(
        "-b",
        "--backup",
        action="store_true",
        help="Create backup of existing .agent folder before updating",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, context: CommandContext) -> int:
    console = context.console
    agent_dir = context.agent_dir
    name = context.agent_dir_name

    print_banner(console, f"🔄 {KIT_NAME} - Update")

    if not agent_dir.is_dir():
        print_warning(console, f"No {name} folder found!")
        console.print(f"   Run '{COMMAND_NAME} init' first to create it.")
        console.print()
        return 1

    if args.backup:
        backup_path = backup_path_for(agent_dir)
        console.print(f"📦 Creating backup at: {backup_path}")
        try:
            backup_agent_dir(agent_dir, backup_path)
        except OSError as exc:
            print_error(console, f"Error: backup failed: {exc}")
            return 1

    console.print(f"🗑️  Replacing existing {name} folder...")
    console.print("📦 Extracting latest templates...")
    console.print()

    result = install_templates(agent_dir, context.store)
    if not result.success:
        print_error(console, f"Error: {result.error_message}")
        return 1

    print_success(console, f"Successfully updated {name} folder!")
    console.print()
    console.print(f"📊 Updated: {result.total_count} files")
    for category, count in known_categories(result):
        console.print(f"   • {count} {category.value}")
    console.print()
    print_skipped(context, result)
    return 0
