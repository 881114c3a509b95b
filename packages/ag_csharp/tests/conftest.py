from __future__ import annotations

from pathlib import Path

import pytest

from ag_csharp.templates import MappingResourceStore, encode_resource_key


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "AG_CSHARP_PROJECT_DIR",
        "AG_CSHARP_AGENT_DIR_NAME",
        "AG_CSHARP_NO_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AG_CSHARP_LOG_LEVEL", "WARNING")


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def small_store() -> MappingResourceStore:
    return MappingResourceStore(
        {
            encode_resource_key(".agent/rules/01_style.md"): (
                "---\ndescription: Style rules\n---\n# Style\n"
            ),
            encode_resource_key(".agent/skills/generate_entity.md"): "# Skill\n",
            encode_resource_key(".agent/workflows/review.md"): (
                "---\ndescription: Review steps\n---\n# Review\n"
            ),
        }
    )
