"""`init`: create the `.agent` folder in the project directory."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from ag_csharp.commands.context import KIT_NAME, CommandContext, known_categories, print_skipped
from ag_csharp.console import print_error, print_success, print_warning
from ag_csharp.templates import install_templates

if TYPE_CHECKING:
    from ag_csharp.templates import ExtractionResult


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "init",
        help="Initialize .agent folder in the current directory",
        description="Initialize .agent folder in the current directory",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing .agent folder if it exists",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, context: CommandContext) -> int:
    console = context.console
    agent_dir = context.agent_dir
    name = context.agent_dir_name

    console.print()
    console.print(f"🚀 {KIT_NAME}")
    console.print("-" * 41)
    console.print()

    if agent_dir.exists():
        if not args.force:
            print_warning(console, f"{name} folder already exists!")
            console.print("   Use --force to overwrite existing configuration.")
            console.print()
            return 1
        console.print(f"🗑️  Replacing existing {name} folder...")

    console.print("📦 Extracting templates...")
    console.print()

    result = install_templates(agent_dir, context.store)
    if not result.success:
        print_error(console, f"Error: {result.error_message}")
        return 1

    print_success(console, f"Successfully initialized {name} folder!")
    console.print()
    _print_tree(context, result)
    print_skipped(context, result)
    console.print("💡 Your AI assistant will now use these rules, skills, and workflows")
    console.print("   to provide C# backend development guidance.")
    console.print()
    return 0


def _print_tree(context: CommandContext, result: ExtractionResult) -> None:
    console = context.console
    rows = known_categories(result)
    console.print("📁 Created structure:")
    console.print(f"   {context.agent_dir}")
    for index, (category, count) in enumerate(rows):
        branch = "└──" if index == len(rows) - 1 else "├──"
        console.print(f"   {branch} {(category.value + '/').ljust(12)}({count} files)")
    console.print()
    console.print(f"📊 Total: {result.total_count} markdown files")
    console.print()
