"""`version`: show tool, runtime and content information."""

from __future__ import annotations

import argparse
import platform
from importlib import metadata

from ag_csharp import __version__
from ag_csharp.commands.context import COMMAND_NAME, DISTRIBUTION_NAME, CommandContext
from ag_csharp.console import print_banner
from ag_csharp.templates import TemplateCategory

CONTENT_BLURBS = {
    TemplateCategory.RULES: ("Rules", "C# standards, architecture, security"),
    TemplateCategory.SKILLS: ("Skills", "Code generation templates"),
    TemplateCategory.WORKFLOWS: ("Workflows", "Development processes"),
}


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "version",
        help="Display tool version information",
        description="Display tool version information",
    )
    parser.set_defaults(handler=run)


def package_version() -> str:
    """Return the installed distribution version, or the source version."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return __version__


def run(args: argparse.Namespace, context: CommandContext) -> int:
    console = context.console
    counts = context.catalog().counts()

    print_banner(console, "🚀 Antigravity C# Backend Developer Kit")
    console.print(f"   Version:     {package_version()}")
    console.print(f"   Runtime:     Python {platform.python_version()}")
    console.print(f"   OS:          {platform.platform()}")
    console.print()
    console.print(f"   📦 Package:   {DISTRIBUTION_NAME}")
    console.print(f"   🔧 Command:   {COMMAND_NAME}")
    console.print()
    console.print("   📚 Content:")
    for category in TemplateCategory:
        label, blurb = CONTENT_BLURBS[category]
        console.print(f"      • {counts[category.value]} {label.ljust(10)}({blurb})")
    console.print()
    return 0
