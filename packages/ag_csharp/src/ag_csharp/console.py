"""Console output helpers shared by the commands."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ag_csharp.templates.keys import TemplateCategory

RULE = "━" * 50

# icon, colour
CATEGORY_STYLES = {
    TemplateCategory.RULES: ("📘", "cyan"),
    TemplateCategory.SKILLS: ("🎯", "magenta"),
    TemplateCategory.WORKFLOWS: ("🔄", "yellow"),
}


def make_console(*, no_color: bool = False) -> Console:
    """Create the stdout console. Output is never parsed as rich markup."""
    return Console(no_color=no_color, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_banner(console: Console, title: str, rule: str = RULE) -> None:
    console.print()
    console.print(title)
    console.print(rule)
    console.print()


def print_success(console: Console, message: str) -> None:
    console.print(f"✅ {message}", style="green")


def print_warning(console: Console, message: str) -> None:
    console.print(f"⚠️  {message}", style="yellow")


def print_error(console: Console, message: str) -> None:
    console.print(f"❌ {message}", style="red")


def print_check(console: Console, passed: bool, message: str) -> None:
    mark = ("   ✓ ", "green") if passed else ("   ✗ ", "red")
    console.print(Text.assemble(mark, message))
