from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from jsonfiles import cli
from jsonfiles.config import DEFAULT_DIRECTORY_NAME
from tests.helpers import BUNDLE_DIR, write_bundle

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for variable in ("JSONFILES_DOCUMENTS_ROOT", "JSONFILES_DEFAULT_DIRECTORY", "JSONFILES_BUNDLE_PATH"):
        monkeypatch.delenv(variable, raising=False)


def _invoke(root: Path, *args: str, input: str | None = None):
    return runner.invoke(cli.app, ["--root", str(root), "--bundle", str(BUNDLE_DIR), *args], input=input)


def test_save_show_and_delete_round_trip(tmp_path) -> None:
    root = tmp_path / "docs"

    saved = _invoke(root, "save", "User", input='{"firstName": "A", "lastName": "B"}')
    assert saved.exit_code == 0, saved.output
    stored = root / DEFAULT_DIRECTORY_NAME / "User.json"
    assert stored.exists()

    shown = _invoke(root, "show", "User")
    assert shown.exit_code == 0, shown.output
    assert json.loads(shown.output) == {"firstName": "A", "lastName": "B"}

    located = _invoke(root, "path", "User")
    assert located.output.strip().endswith("present")

    deleted = _invoke(root, "delete", "User")
    assert deleted.exit_code == 0
    assert not stored.exists()

    again = _invoke(root, "delete", "User")
    assert again.exit_code == 1
    assert "File 'User' not found." in again.output


def test_save_from_file_into_named_directory(tmp_path) -> None:
    root = tmp_path / "docs"
    source = tmp_path / "input.json"
    source.write_text('{"theme": "dark"}', encoding="utf-8")

    result = _invoke(root, "save", "Prefs", str(source), "--dir", "Settings")

    assert result.exit_code == 0, result.output
    assert json.loads((root / "Settings" / "Prefs.json").read_text(encoding="utf-8")) == {"theme": "dark"}


def test_show_falls_back_to_bundle(tmp_path) -> None:
    root = tmp_path / "docs"

    before = _invoke(root, "path", "UsersArray", "--dir", "Seeded")
    assert before.output.strip().endswith("absent")

    shown = _invoke(root, "show", "UsersArray", "--dir", "Seeded")
    assert shown.exit_code == 0, shown.output
    assert [user["lastName"] for user in json.loads(shown.output)] == ["Lovelace", "Turing"]
    assert (root / "Seeded" / "UsersArray.json").exists()


def test_seed_replaces_existing_and_reports_missing(tmp_path) -> None:
    root = tmp_path / "docs"
    bundle = write_bundle(tmp_path / "bundle", {"Config": {"version": 2}})
    target = root / DEFAULT_DIRECTORY_NAME / "Config.json"
    target.parent.mkdir(parents=True)
    target.write_text('{"version": 1}', encoding="utf-8")

    seeded = runner.invoke(cli.app, ["--root", str(root), "--bundle", str(bundle), "seed", "Config"])
    assert seeded.exit_code == 0, seeded.output
    assert json.loads(target.read_text(encoding="utf-8")) == {"version": 2}

    missing = runner.invoke(cli.app, ["--root", str(root), "--bundle", str(bundle), "seed", "Missing"])
    assert missing.exit_code == 1
    assert "Missing" in missing.output


def test_purge_and_default_dir_override(tmp_path) -> None:
    root = tmp_path / "docs"
    saved = runner.invoke(cli.app, ["--root", str(root), "--default-dir", "Scratch", "save", "Doc"], input="[1, 2]")
    assert saved.exit_code == 0, saved.output
    assert (root / "Scratch" / "Doc.json").exists()

    purged = runner.invoke(cli.app, ["--root", str(root), "purge", "--dir", "Scratch", "--yes"])
    assert purged.exit_code == 0, purged.output
    assert not (root / "Scratch").exists()

    missing = runner.invoke(cli.app, ["--root", str(root), "purge", "--dir", "Vault", "--yes"])
    assert missing.exit_code == 1
    assert "Directory 'Vault' not found." in missing.output


def test_purge_asks_for_confirmation(tmp_path) -> None:
    root = tmp_path / "docs"
    runner.invoke(cli.app, ["--root", str(root), "save", "Doc"], input="{}")

    declined = runner.invoke(cli.app, ["--root", str(root), "purge"], input="n\n")

    assert declined.exit_code != 0
    assert (root / DEFAULT_DIRECTORY_NAME / "Doc.json").exists()


def test_invalid_json_input_fails(tmp_path) -> None:
    result = _invoke(tmp_path / "docs", "save", "Bad", input="{nope")

    assert result.exit_code == 1
    assert not (tmp_path / "docs").exists()


def test_init_config_writes_defaults(tmp_path) -> None:
    dest = tmp_path / "jsonfiles.yaml"

    result = runner.invoke(cli.app, ["init-config", str(dest)])

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(dest.read_text(encoding="utf-8"))
    assert data["storage"]["default_directory_name"] == DEFAULT_DIRECTORY_NAME


def test_config_file_option(tmp_path) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text(
        yaml.safe_dump({"storage": {"documents_root": str(tmp_path / "from-config"), "default_directory_name": "Cfg"}}),
        encoding="utf-8",
    )

    result = runner.invoke(cli.app, ["--config", str(settings), "save", "Doc"], input='{"ok": true}')

    assert result.exit_code == 0, result.output
    assert (tmp_path / "from-config" / "Cfg" / "Doc.json").exists()
