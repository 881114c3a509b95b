"""Materialize bundled templates into an `.agent` folder on disk."""

from __future__ import annotations

import logging
import shutil
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from ag_csharp.templates.keys import (
    RESOURCE_PREFIX,
    MalformedResourceKeyError,
    decode_resource_key,
)
from ag_csharp.templates.store import default_store

if TYPE_CHECKING:
    from ag_csharp.templates.store import ResourceStore

logger = logging.getLogger(__name__)

NO_TEMPLATES_MESSAGE = "No embedded templates found in the package."
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one extraction run."""

    success: bool
    error_message: str | None = None
    counts_by_category: dict[str, int] = field(default_factory=dict)
    skipped_keys: tuple[str, ...] = ()

    @property
    def total_count(self) -> int:
        return sum(self.counts_by_category.values())

    def count(self, category: str) -> int:
        """Return the number of files written for ``category``."""
        return self.counts_by_category.get(str(category), 0)


def extract_templates(
    target_root: str | Path,
    store: ResourceStore | None = None,
    *,
    prefix: str = RESOURCE_PREFIX,
) -> ExtractionResult:
    """Write every template resource below ``target_root``.

    Each key is decoded to ``<category>/<file name>`` and written under
    ``target_root``, overwriting existing files. Keys without the prefix are
    ignored. Malformed keys are skipped with a warning and reported in
    ``skipped_keys``; they do not fail the run. Store and filesystem errors end
    the run with ``success=False`` and may leave a partially written tree.

    Args:
        target_root: The `.agent` folder to populate. Created when missing.
        store: Resource store to read from. Defaults to the bundled templates.
        prefix: Prefix identifying template resource keys.

    Returns:
        The extraction result with per-category counts.
    """
    store = store if store is not None else default_store()
    target = Path(target_root)
    counts: Counter[str] = Counter()
    skipped: list[str] = []

    try:
        keys = store.keys()
        if not any(key.startswith(prefix) for key in keys):
            return ExtractionResult(success=False, error_message=NO_TEMPLATES_MESSAGE)

        for key in keys:
            try:
                decoded = decode_resource_key(key, prefix)
            except MalformedResourceKeyError as exc:
                logger.warning("Skipping resource: %s", exc)
                skipped.append(key)
                continue
            if decoded is None:
                logger.debug("Ignoring non-template resource %s", key)
                continue

            destination = target / decoded.category / decoded.file_name
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(store.read_bytes(key))
            counts[decoded.category] += 1
            logger.debug("Extracted %s -> %s", key, destination)
    except (OSError, KeyError) as exc:
        logger.error("Template extraction into %s failed: %s", target, exc)
        return ExtractionResult(
            success=False,
            error_message=str(exc),
            counts_by_category=dict(counts),
            skipped_keys=tuple(skipped),
        )

    logger.info("Extracted %d templates into %s", sum(counts.values()), target)
    return ExtractionResult(
        success=True, counts_by_category=dict(counts), skipped_keys=tuple(skipped)
    )


def install_templates(
    agent_dir: str | Path,
    store: ResourceStore | None = None,
    *,
    prefix: str = RESOURCE_PREFIX,
) -> ExtractionResult:
    """Replace ``agent_dir`` with a fresh extraction.

    Templates are extracted into a staging folder next to ``agent_dir`` which
    is renamed into place only once extraction succeeded. When extraction
    fails the staging folder is removed and an existing ``agent_dir`` is left
    as it was.
    """
    target = Path(agent_dir)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        staging = target.with_name(f"{target.name}.staging.{uuid.uuid4().hex[:8]}")
        staging.mkdir()
    except OSError as exc:
        logger.error("Could not create a staging folder next to %s: %s", target, exc)
        return ExtractionResult(success=False, error_message=str(exc))

    result = extract_templates(staging, store, prefix=prefix)
    if not result.success:
        shutil.rmtree(staging, ignore_errors=True)
        return result

    try:
        _swap_into_place(staging, target)
    except OSError as exc:
        logger.error("Could not move extracted templates into %s: %s", target, exc)
        shutil.rmtree(staging, ignore_errors=True)
        return ExtractionResult(
            success=False,
            error_message=str(exc),
            counts_by_category=result.counts_by_category,
            skipped_keys=result.skipped_keys,
        )
    return result


def _swap_into_place(staging: Path, target: Path) -> None:
    retired: Path | None = None
    if target.exists():
        retired = target.with_name(f"{target.name}.retired.{uuid.uuid4().hex[:8]}")
        target.rename(retired)

    try:
        staging.rename(target)
    except OSError:
        if retired is not None:
            retired.rename(target)
        raise

    if retired is not None:
        shutil.rmtree(retired, ignore_errors=True)
        if retired.exists():
            logger.warning("Previous templates left behind at %s", retired)


def backup_path_for(agent_dir: str | Path, now: datetime | None = None) -> Path:
    """Return the timestamped sibling folder used to back up ``agent_dir``."""
    target = Path(agent_dir)
    stamp = (now or datetime.now().astimezone()).strftime(BACKUP_TIMESTAMP_FORMAT)
    return target.with_name(f"{target.name}.backup.{stamp}")


def backup_agent_dir(agent_dir: str | Path, destination: str | Path | None = None) -> Path:
    """Copy ``agent_dir`` to a backup folder and return the backup path.

    Raises:
        FileExistsError: If the backup folder already exists.
        OSError: If the copy fails.
    """
    source = Path(agent_dir)
    backup = Path(destination) if destination is not None else backup_path_for(source)
    shutil.copytree(source, backup)
    logger.info("Backed up %s to %s", source, backup)
    return backup
