"""State shared by every subcommand."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ag_csharp.templates import Catalog, ExtractionResult, TemplateCategory, load_catalog

if TYPE_CHECKING:
    from rich.console import Console

    from ag_csharp.templates import ResourceStore

KIT_NAME = "Antigravity C# Backend Kit"
COMMAND_NAME = "ag-csharp"
DISTRIBUTION_NAME = "ag-csharp"


@dataclass(frozen=True)
class CommandContext:
    """Console, target folder and template store for one invocation."""

    console: Console
    project_dir: Path
    agent_dir_name: str
    store: ResourceStore

    @property
    def agent_dir(self) -> Path:
        return self.project_dir / self.agent_dir_name

    def catalog(self) -> Catalog:
        return load_catalog(self.store)


def print_skipped(context: CommandContext, result: ExtractionResult) -> None:
    """Warn about resources that could not be mapped to a file."""
    if not result.skipped_keys:
        return
    console = context.console
    console.print(
        f"⚠️  {len(result.skipped_keys)} bundled resource(s) were skipped:", style="yellow"
    )
    for key in result.skipped_keys:
        console.print(f"   • {key}")
    console.print()


def known_categories(result: ExtractionResult) -> list[tuple[TemplateCategory, int]]:
    return [(category, result.count(category)) for category in TemplateCategory]
