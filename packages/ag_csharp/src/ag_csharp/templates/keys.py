"""Map flat resource keys back to `.agent/<category>/<file>` paths.

Bundled templates are addressed by a flat key: the package prefix followed by
the file's path under ``resources/`` with every ``/`` replaced by ``.``::

    ag_csharp.resources..agent.skills.generate_entity.md

The doubled dot comes from the leading dot of the ``.agent`` folder. File names
keep their own dots (``v1.2_entity.md``), so everything after the category
token is joined back together instead of splitting off a single extension.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

RESOURCE_PREFIX = "ag_csharp.resources."
KEY_SEPARATOR = "."
MIN_KEY_TOKENS = 4


class TemplateCategory(StrEnum):
    """Known `.agent` sub-folders, in display order."""

    RULES = "rules"
    SKILLS = "skills"
    WORKFLOWS = "workflows"


class TemplateError(Exception):
    """Base error for bundled template handling."""


class MalformedResourceKeyError(TemplateError):
    """A prefixed resource key has too few segments to name a template file."""

    def __init__(self, key: str, token_count: int) -> None:
        self.key = key
        self.token_count = token_count
        message = (
            f"Resource key '{key}' has {token_count} segment(s) after the prefix, "
            f"expected at least {MIN_KEY_TOKENS}"
        )
        super().__init__(message)


@dataclass(frozen=True)
class DecodedPath:
    """Category folder and file name recovered from a resource key."""

    category: str
    file_name: str

    @property
    def relative_path(self) -> str:
        return f"{self.category}/{self.file_name}"


def encode_resource_key(relative_path: str, prefix: str = RESOURCE_PREFIX) -> str:
    """Build the flat key for a POSIX path relative to the resources root."""
    return prefix + relative_path.replace("/", KEY_SEPARATOR)


def decode_resource_key(key: str, prefix: str = RESOURCE_PREFIX) -> DecodedPath | None:
    """Decode a resource key into its category and file name.

    Args:
        key: Flat resource key as enumerated from a resource store.
        prefix: Prefix every template key starts with.

    Returns:
        The decoded path, or None when the key does not carry the prefix and
        is therefore not a template resource.

    Raises:
        MalformedResourceKeyError: If the key carries the prefix but splits
            into fewer than four segments.
    """
    if not key.startswith(prefix):
        return None

    tokens = key[len(prefix) :].split(KEY_SEPARATOR)
    if len(tokens) < MIN_KEY_TOKENS:
        raise MalformedResourceKeyError(key, len(tokens))

    # tokens[0] is the empty segment left by ".agent", tokens[1] the bundle root.
    # Neither is checked, and the category is passed through as-is.
    return DecodedPath(category=tokens[2], file_name=KEY_SEPARATOR.join(tokens[3:]))
