"""Inspect an extracted `.agent` folder for missing or empty content."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ag_csharp.templates.keys import TemplateCategory

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class ValidationReport:
    """Findings for one `.agent` folder."""

    agent_dir: Path
    exists: bool
    directories: dict[str, bool] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)
    expected: dict[str, int] = field(default_factory=dict)
    issues: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.exists and not self.issues

    def meets_minimum(self, category: str) -> bool:
        return self.counts.get(category, 0) >= self.expected.get(category, 0)


def _markdown_files(folder: Path) -> list[Path]:
    if not folder.is_dir():
        return []
    return sorted(path for path in folder.glob("*.md") if path.is_file())


def validate_agent_dir(
    agent_dir: str | Path, expected_counts: Mapping[str, int]
) -> ValidationReport:
    """Check the category folders, their markdown counts and empty files.

    Args:
        agent_dir: The `.agent` folder to inspect.
        expected_counts: Minimum number of markdown files per category.

    Returns:
        A report listing every issue found. A missing ``agent_dir`` yields a
        report with ``exists=False`` and no issues.
    """
    root = Path(agent_dir)
    expected = {category.value: expected_counts.get(category.value, 0) for category in TemplateCategory}
    if not root.is_dir():
        return ValidationReport(agent_dir=root, exists=False, expected=expected)

    issues: list[str] = []
    directories: dict[str, bool] = {}
    files: dict[str, list[Path]] = {}
    for category in TemplateCategory:
        folder = root / category.value
        directories[category.value] = folder.is_dir()
        files[category.value] = _markdown_files(folder)
        if not directories[category.value]:
            issues.append(f"Missing '{category.value}' directory")

    counts = {category: len(paths) for category, paths in files.items()}
    for category, count in counts.items():
        if count < expected[category]:
            issues.append(f"Expected at least {expected[category]} {category}, found {count}")

    for paths in files.values():
        issues.extend(f"Empty file: {path.name}" for path in paths if path.stat().st_size == 0)

    return ValidationReport(
        agent_dir=root,
        exists=True,
        directories=directories,
        counts=counts,
        expected=expected,
        issues=issues,
    )
