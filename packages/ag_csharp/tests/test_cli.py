from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from ag_csharp.cli import build_parser, main
from ag_csharp.templates import MappingResourceStore


def _tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_init_creates_agent_folder(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init"]) == 0

    output = capsys.readouterr().out
    assert "Successfully initialized .agent folder!" in output
    assert "rules/      (13 files)" in output
    assert "skills/     (17 files)" in output
    assert "workflows/  (8 files)" in output
    assert "Total: 38 markdown files" in output
    assert (project_dir / ".agent" / "skills" / "generate_entity.md").is_file()


def test_init_refuses_existing_folder_without_force(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    marker = project_dir / ".agent" / "rules" / "custom.md"
    marker.parent.mkdir(parents=True)
    marker.write_text("mine", encoding="utf-8")

    assert main(["init"]) == 1

    assert ".agent folder already exists!" in capsys.readouterr().out
    assert marker.read_text(encoding="utf-8") == "mine"


def test_init_force_replaces_folder(project_dir: Path) -> None:
    marker = project_dir / ".agent" / "rules" / "custom.md"
    marker.parent.mkdir(parents=True)
    marker.write_text("mine", encoding="utf-8")

    assert main(["init", "--force"]) == 0

    assert not marker.exists()
    assert len(list((project_dir / ".agent" / "rules").glob("*.md"))) == 13


def test_init_force_twice_is_byte_identical(project_dir: Path) -> None:
    assert main(["init", "-f"]) == 0
    first = _tree(project_dir / ".agent")
    assert main(["init", "-f"]) == 0

    assert _tree(project_dir / ".agent") == first


def test_init_with_injected_store(
    project_dir: Path,
    small_store: MappingResourceStore,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["init"], store=small_store) == 0

    assert _tree(project_dir / ".agent")["skills/generate_entity.md"] == b"# Skill\n"
    assert "Total: 3 markdown files" in capsys.readouterr().out


def test_init_warns_about_skipped_resources(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    store = MappingResourceStore(
        {
            "ag_csharp.resources..agent.skills": "# broken",
            "ag_csharp.resources..agent.skills.generate_dto.md": "# DTO",
        }
    )

    assert main(["init"], store=store) == 0

    output = capsys.readouterr().out
    assert "1 bundled resource(s) were skipped" in output
    assert "ag_csharp.resources..agent.skills" in output


def test_init_reports_extraction_failure(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["init"], store=MappingResourceStore({})) == 1

    assert "Error: No embedded templates found" in capsys.readouterr().out
    assert not (project_dir / ".agent").exists()


def test_directory_option_targets_other_project(tmp_path: Path, project_dir: Path) -> None:
    other = tmp_path / "other"
    other.mkdir()

    assert main(["-C", str(other), "init"]) == 0

    assert (other / ".agent" / "workflows" / "testing.md").is_file()
    assert not (project_dir / ".agent").exists()


def test_update_requires_existing_folder(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["update"]) == 1

    output = capsys.readouterr().out
    assert "No .agent folder found!" in output
    assert "Run 'ag-csharp init' first" in output


def test_update_with_backup_keeps_previous_content(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    agent_dir = project_dir / ".agent"
    (agent_dir / "rules").mkdir(parents=True)
    (agent_dir / "rules" / "01_csharp_standards.md").write_text("edited", encoding="utf-8")
    (agent_dir / "rules" / "local.md").write_bytes(b"local notes\n")
    before = _tree(agent_dir)

    assert main(["update", "--backup"]) == 0

    backups = sorted(project_dir.glob(".agent.backup.*"))
    assert len(backups) == 1
    assert _tree(backups[0]) == before
    assert not (agent_dir / "rules" / "local.md").exists()
    assert (agent_dir / "rules" / "01_csharp_standards.md").read_text(encoding="utf-8") != "edited"
    output = capsys.readouterr().out
    assert "Creating backup at:" in output
    assert "Updated: 38 files" in output


def test_update_without_backup_leaves_no_copies(project_dir: Path) -> None:
    assert main(["init"]) == 0
    assert main(["update"]) == 0

    assert sorted(path.name for path in project_dir.iterdir()) == [".agent"]


def test_list_all_categories(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 0

    output = capsys.readouterr().out
    assert "RULES (13 files)" in output
    assert "SKILLS (17 files)" in output
    assert "WORKFLOWS (8 files)" in output
    assert "• generate_grpc_service.md" in output
    assert "Total: 38 files" in output
    assert not (project_dir / ".agent").exists()


def test_list_only_selected_categories(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["list", "-s", "-w"]) == 0

    output = capsys.readouterr().out
    assert "SKILLS (17 files)" in output
    assert "WORKFLOWS (8 files)" in output
    assert "RULES" not in output
    assert "01_csharp_standards.md" not in output


def test_validate_after_init_passes(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init"]) == 0
    capsys.readouterr()

    assert main(["validate"]) == 0

    output = capsys.readouterr().out
    assert "Validation passed!" in output
    assert "Skills: 17/17" in output


def test_validate_reports_issues_but_exits_zero(
    project_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["init"]) == 0
    (project_dir / ".agent" / "skills" / "generate_dto.md").unlink()
    (project_dir / ".agent" / "rules" / "06_logging.md").write_bytes(b"")
    capsys.readouterr()

    assert main(["validate"]) == 0

    output = capsys.readouterr().out
    assert "Found 2 issue(s):" in output
    assert "Expected at least 17 skills, found 16" in output
    assert "Empty file: 06_logging.md" in output
    assert "Run 'ag-csharp update' to fix these issues." in output


def test_validate_without_folder(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate"]) == 0

    assert ".agent folder not found!" in capsys.readouterr().out


def test_version(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["version"]) == 0

    output = capsys.readouterr().out
    assert "Version:" in output
    assert "Runtime:     Python" in output
    assert "13 Rules" in output
    assert "17 Skills" in output
    assert "8 Workflows" in output


def test_invalid_settings_exit_with_error(
    project_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("AG_CSHARP_LOG_LEVEL", "loud")

    assert main(["version"]) == 1

    assert "Unknown log level" in capsys.readouterr().err


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_rejects_unknown_flag() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["validate", "--force"])


def test_init_agent_dir_is_readable_by_others(project_dir: Path) -> None:
    previous = os.umask(0o022)
    try:
        plain = project_dir / "plain"
        plain.mkdir()
        assert main(["init"]) == 0
    finally:
        os.umask(previous)

    agent_mode = stat.S_IMODE((project_dir / ".agent").stat().st_mode)
    assert agent_mode == stat.S_IMODE(plain.stat().st_mode)
    assert agent_mode & stat.S_IROTH


def test_settings_choose_project_and_folder_name(
    tmp_path: Path, project_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    other = tmp_path / "configured"
    other.mkdir()
    monkeypatch.setenv("AG_CSHARP_PROJECT_DIR", str(other))
    monkeypatch.setenv("AG_CSHARP_AGENT_DIR_NAME", ".agents")

    assert main(["init"]) == 0

    assert (other / ".agents" / "rules" / "01_csharp_standards.md").is_file()
    assert not (project_dir / ".agent").exists()
