"""`list`: show the bundled rules, skills and workflows."""

from __future__ import annotations

import argparse

from ag_csharp.commands.context import KIT_NAME, CommandContext
from ag_csharp.console import CATEGORY_STYLES, RULE, print_banner
from ag_csharp.templates import CATEGORY_SUMMARIES, TemplateCategory


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "list",
        help="List available rules, skills, and workflows",
        description="List available rules, skills, and workflows",
    )
    parser.add_argument("-r", "--rules", action="store_true", help="List only rules")
    parser.add_argument("-s", "--skills", action="store_true", help="List only skills")
    parser.add_argument("-w", "--workflows", action="store_true", help="List only workflows")
    parser.set_defaults(handler=run)


def selected_categories(args: argparse.Namespace) -> list[TemplateCategory]:
    """Return the categories picked by the flags; none picked means all."""
    chosen = [category for category in TemplateCategory if getattr(args, category.value)]
    return chosen or list(TemplateCategory)


def run(args: argparse.Namespace, context: CommandContext) -> int:
    console = context.console
    catalog = context.catalog()

    print_banner(console, f"📋 {KIT_NAME} - Content Catalog")

    for category in selected_categories(args):
        icon, colour = CATEGORY_STYLES[category]
        entries = catalog.entries(category)
        console.print(f"{icon} {category.value.upper()} ({len(entries)} files)", style=colour)
        console.print(f"   {CATEGORY_SUMMARIES[category]}")
        console.print()
        for entry in entries:
            console.print(f"   • {entry.name}")
            console.print(f"     {entry.description}", style="bright_black")
        console.print()

    console.print(RULE)
    console.print(f"📊 Total: {catalog.total_count} files")
    console.print()
    return 0
