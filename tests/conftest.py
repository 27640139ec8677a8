"""Shared test fixtures."""

import pytest

from git_updater.headers.models import UnitKind
from git_updater.scanner.models import PackageRecord
from git_updater.upgrader.feedback import RecordingFeedback


class StubFilesystem:
    """Records moves and returns a fixed result without touching disk."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.moves: list[tuple[str, str, bool]] = []

    def move(self, source, dest, overwrite=False) -> bool:
        self.moves.append((str(source), str(dest), overwrite))
        return self.succeed


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def stub_filesystem():
    return StubFilesystem()


@pytest.fixture
def failing_filesystem():
    return StubFilesystem(succeed=False)


@pytest.fixture
def widget_plugin():
    """A plugin declaring a public GitHub repository."""
    return PackageRecord(
        host_id="widget/widget.php",
        kind=UnitKind.INSTALLABLE_UNIT,
        headers={"GitHub Plugin URI": "https://github.com/acme/widget"},
        name="Widget",
        author="Acme",
        version="1.2.0",
        description="Adds widgets",
    )


@pytest.fixture
def gadget_theme():
    """A theme declaring a private Bitbucket repository."""
    return PackageRecord(
        host_id="gadget",
        kind=UnitKind.APPEARANCE_UNIT,
        headers={
            "Bitbucket Theme URI": "acme/gadget",
            "Bitbucket Branch": "develop",
            "Bitbucket Access Token": "s3cret",
        },
        name="Gadget",
        author="Acme",
        version="0.9.1",
        description="A theme",
    )


PLUGIN_FILE = """<?php
/**
 * Plugin Name:       {name}
 * Description:       Adds widgets
 * Version:           1.2.0
 * Author:            Acme
 * GitHub Plugin URI: {uri}
 * GitHub Branch:     develop
 */
"""

THEME_STYLESHEET = """/*
Theme Name: {name}
Author: Acme
Version: 0.9.1
Description: A theme
Bitbucket Theme URI: {uri}
*/
"""


@pytest.fixture
def plugins_dir(tmp_path):
    """A plugins directory with one repo-backed plugin and one plain plugin."""
    root = tmp_path / "plugins"
    (root / "widget").mkdir(parents=True)
    (root / "widget" / "widget.php").write_text(
        PLUGIN_FILE.format(name="Widget", uri="https://github.com/acme/widget")
    )
    (root / "widget" / "helpers.php").write_text("<?php\nfunction helper() {}\n")
    (root / "hello.php").write_text("<?php\n/*\nPlugin Name: Hello\nVersion: 1.0\n*/\n")
    return root


@pytest.fixture
def themes_dir(tmp_path):
    """A theme root with one repo-backed theme and one directory without style.css."""
    root = tmp_path / "themes"
    (root / "gadget").mkdir(parents=True)
    (root / "gadget" / "style.css").write_text(
        THEME_STYLESHEET.format(name="Gadget", uri="https://bitbucket.org/acme/gadget")
    )
    (root / "broken").mkdir()
    (root / ".DS_Store").write_text("")
    return root
