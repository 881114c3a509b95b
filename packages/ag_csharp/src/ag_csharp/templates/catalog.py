"""Descriptive listing of the bundled rules, skills and workflows.

The catalog is built from the resource store itself, so it always names the
files an extraction would write.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ag_csharp.markdown_utils import describe_markdown
from ag_csharp.templates.keys import (
    RESOURCE_PREFIX,
    MalformedResourceKeyError,
    TemplateCategory,
    decode_resource_key,
)
from ag_csharp.templates.store import default_store

if TYPE_CHECKING:
    from ag_csharp.templates.store import ResourceStore

logger = logging.getLogger(__name__)

CATEGORY_SUMMARIES = {
    TemplateCategory.RULES: "Guidelines and standards for C# development",
    TemplateCategory.SKILLS: "Code generation templates and prompts",
    TemplateCategory.WORKFLOWS: "Step-by-step processes for common tasks",
}


@dataclass(frozen=True)
class CatalogEntry:
    """A template file name and its one-line description."""

    name: str
    description: str


@dataclass(frozen=True)
class Catalog:
    """Catalog entries grouped by category, each group ordered by name."""

    rules: tuple[CatalogEntry, ...] = ()
    skills: tuple[CatalogEntry, ...] = ()
    workflows: tuple[CatalogEntry, ...] = ()

    def entries(self, category: TemplateCategory | str) -> tuple[CatalogEntry, ...]:
        return getattr(self, TemplateCategory(category).value)

    def counts(self) -> dict[str, int]:
        """Return the number of entries per category."""
        return {category.value: len(self.entries(category)) for category in TemplateCategory}

    @property
    def total_count(self) -> int:
        return sum(self.counts().values())


def load_catalog(
    store: ResourceStore | None = None, *, prefix: str = RESOURCE_PREFIX
) -> Catalog:
    """Build the catalog from the template resources in ``store``."""
    store = store if store is not None else default_store()
    grouped: dict[TemplateCategory, list[CatalogEntry]] = {
        category: [] for category in TemplateCategory
    }

    for key in store.keys():
        try:
            decoded = decode_resource_key(key, prefix)
        except MalformedResourceKeyError:
            continue
        if decoded is None:
            continue
        if decoded.category not in grouped:
            logger.debug("Resource %s is outside the known categories", key)
            continue

        text = store.read_bytes(key).decode("utf-8", errors="replace")
        grouped[TemplateCategory(decoded.category)].append(
            CatalogEntry(name=decoded.file_name, description=describe_markdown(text))
        )

    return Catalog(
        **{
            category.value: tuple(sorted(entries, key=lambda entry: entry.name))
            for category, entries in grouped.items()
        }
    )
