"""Read-only stores of bundled template blobs addressed by flat keys."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from typing import TYPE_CHECKING, Protocol

from ag_csharp.templates.keys import RESOURCE_PREFIX, encode_resource_key

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "ag_csharp"
RESOURCE_DIR = "resources"


class ResourceStore(Protocol):
    """Enumerable, read-only collection of named byte blobs."""

    def keys(self) -> list[str]:
        """Return every resource key, sorted."""
        ...

    def read_bytes(self, key: str) -> bytes:
        """Return the content for ``key``; raise KeyError when unknown."""
        ...


class MappingResourceStore:
    """Resource store backed by an in-memory mapping of key to content."""

    def __init__(self, blobs: Mapping[str, bytes | str]) -> None:
        self._blobs = {
            key: value.encode("utf-8") if isinstance(value, str) else bytes(value)
            for key, value in blobs.items()
        }

    def keys(self) -> list[str]:
        return sorted(self._blobs)

    def read_bytes(self, key: str) -> bytes:
        return self._blobs[key]


class PackageResourceStore:
    """Resource store over the template files shipped inside the package.

    Every file below the resources root is exposed under the key produced by
    :func:`encode_resource_key` for its relative path.
    """

    def __init__(
        self, root: Traversable | None = None, prefix: str = RESOURCE_PREFIX
    ) -> None:
        if root is None:
            root = resources.files(RESOURCE_PACKAGE) / RESOURCE_DIR
        self._root = root
        self._prefix = prefix
        self._index: dict[str, Traversable] | None = None

    def keys(self) -> list[str]:
        return sorted(self._entries())

    def read_bytes(self, key: str) -> bytes:
        return self._entries()[key].read_bytes()

    def _entries(self) -> dict[str, Traversable]:
        if self._index is None:
            self._index = {
                encode_resource_key(path, self._prefix): node
                for path, node in _walk_files(self._root, "")
            }
            logger.debug("Indexed %d bundled resources under %s", len(self._index), self._root)
        return self._index


def _walk_files(node: Traversable, base: str) -> Iterator[tuple[str, Traversable]]:
    for child in sorted(node.iterdir(), key=lambda item: item.name):
        path = f"{base}/{child.name}" if base else child.name
        if child.is_dir():
            yield from _walk_files(child, path)
        elif child.is_file():
            yield path, child


@lru_cache(maxsize=1)
def default_store() -> PackageResourceStore:
    """Return the process-wide store of bundled templates."""
    return PackageResourceStore()
