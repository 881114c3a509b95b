"""`validate`: report on the structure and content of the `.agent` folder."""

from __future__ import annotations

import argparse

from ag_csharp.commands.context import COMMAND_NAME, KIT_NAME, CommandContext
from ag_csharp.console import print_banner, print_check, print_error, print_success, print_warning
from ag_csharp.templates import TemplateCategory, validate_agent_dir


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "validate",
        help="Validate .agent folder structure and integrity",
        description="Validate .agent folder structure and integrity",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, context: CommandContext) -> int:
    console = context.console
    name = context.agent_dir_name

    print_banner(console, f"🔍 {KIT_NAME} - Validation")

    # Minimums come from the bundled templates, so they track the shipped content.
    report = validate_agent_dir(context.agent_dir, context.catalog().counts())
    if not report.exists:
        print_error(console, f"{name} folder not found!")
        console.print(f"   Run '{COMMAND_NAME} init' to create it.")
        console.print()
        return 0

    console.print("📁 Structure check:")
    for category in TemplateCategory:
        folder = f"{category.value}/".ljust(12)
        count = report.counts[category.value]
        print_check(console, report.directories[category.value], f"{folder}({count} files)")
    console.print()

    console.print("📊 Content check:")
    for category in TemplateCategory:
        count = report.counts[category.value]
        expected = report.expected[category.value]
        print_check(
            console,
            report.meets_minimum(category.value),
            f"{category.value.capitalize()}: {count}/{expected}",
        )
    console.print()

    if report.passed:
        print_success(console, f"Validation passed! Your {name} folder is complete.")
    else:
        print_warning(console, f"Found {len(report.issues)} issue(s):")
        for issue in report.issues:
            console.print(f"   • {issue}")
        console.print()
        console.print(f"   Run '{COMMAND_NAME} update' to fix these issues.")
    console.print()
    return 0
