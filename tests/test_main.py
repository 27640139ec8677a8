"""Tests for the command-line interface."""

import json

import pytest

from git_updater.headers.models import UnitKind
from git_updater.main import kind_for_action, main


def _write_config(tmp_path, plugins_dir, themes_dir, multisite=False):
    config = tmp_path / "config.yaml"
    config.write_text(
        "host:\n"
        f"  plugins_dir: {plugins_dir}\n"
        f"  themes_dir: {themes_dir}\n"
        f"  multisite: {'true' if multisite else 'false'}\n"
    )
    return config


def test_kind_for_action():
    assert kind_for_action("upgrade-theme") is UnitKind.APPEARANCE_UNIT
    assert kind_for_action("update-selected-themes") is UnitKind.APPEARANCE_UNIT
    assert kind_for_action("upgrade-plugin") is UnitKind.INSTALLABLE_UNIT
    assert kind_for_action(None) is UnitKind.INSTALLABLE_UNIT


def test_headers_command(capsys):
    assert main(["headers", "--kind", "theme"]) == 0
    out = capsys.readouterr().out
    assert "GitHub Theme URI" in out
    assert "Bitbucket Access Token" in out


def test_scan_json(tmp_path, plugins_dir, themes_dir, capsys):
    config = _write_config(tmp_path, plugins_dir, themes_dir)

    assert main(["-c", str(config), "scan", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [d["repo"] for d in data["installable_unit"]] == ["widget"]
    assert [d["repo"] for d in data["appearance_unit"]] == ["gadget"]
    assert data["installable_unit"][0]["canonical_uri"] == "https://github.com/acme/widget"


def test_scan_missing_config(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["-c", str(tmp_path / "missing.yaml"), "scan"])
    assert exc.value.code == 1


def test_reconcile_renames_plugin_archive(tmp_path, plugins_dir, themes_dir):
    config = _write_config(tmp_path, plugins_dir, themes_dir)
    upgrade = tmp_path / "upgrade"
    (upgrade / "widget-develop").mkdir(parents=True)

    code = main([
        "-c", str(config),
        "reconcile", str(upgrade / "widget-develop"),
        "--action", "upgrade-plugin",
    ])

    assert code == 0
    assert (upgrade / "widget").is_dir()
    assert not (upgrade / "widget-develop").exists()


def test_reconcile_theme_action_uses_theme_slugs(tmp_path, plugins_dir, themes_dir):
    config = _write_config(tmp_path, plugins_dir, themes_dir)
    upgrade = tmp_path / "upgrade"
    (upgrade / "acme-gadget-1a2b3c4").mkdir(parents=True)

    code = main([
        "-c", str(config),
        "reconcile", str(upgrade / "acme-gadget-1a2b3c4"),
        "--action", "upgrade-theme",
    ])

    assert code == 0
    assert (upgrade / "gadget").is_dir()


def test_reconcile_ignores_unknown_action(tmp_path, plugins_dir, themes_dir):
    config = _write_config(tmp_path, plugins_dir, themes_dir)
    upgrade = tmp_path / "upgrade"
    (upgrade / "widget-develop").mkdir(parents=True)

    code = main([
        "-c", str(config),
        "reconcile", str(upgrade / "widget-develop"),
        "--action", "install-plugin",
    ])

    assert code == 0
    assert (upgrade / "widget-develop").is_dir()
