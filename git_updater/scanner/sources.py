"""Enumerate installed plugins and themes from the host's directories."""

import logging
from pathlib import Path
from typing import Iterator, Protocol

from ..headers.models import UnitKind
from ..headers.vocabulary import PLUGIN_VOCABULARY, THEME_VOCABULARY
from .file_headers import read_file_headers
from .models import PackageRecord

logger = logging.getLogger(__name__)

PLUGIN_META_HEADERS = ("Plugin Name", "Author", "Version", "Description")
THEME_META_HEADERS = ("Theme Name", "Author", "Version", "Description")

IGNORED_ENTRIES = {".", "..", ".DS_Store"}


class PackageSource(Protocol):
    """Anything that can list installed packages."""

    def discover_packages(self) -> Iterator[PackageRecord]:
        ...


class PluginDirectorySource:
    """Lists plugins under a plugins directory.

    A plugin is a ``*.php`` file carrying a ``Plugin Name`` header, either
    directly in the plugins directory or one level down.
    """

    def __init__(self, plugins_dir: Path | str):
        self.plugins_dir = Path(plugins_dir)

    def _plugin_files(self) -> Iterator[Path]:
        if not self.plugins_dir.is_dir():
            logger.warning("Plugins directory not found: %s", self.plugins_dir)
            return

        for entry in sorted(self.plugins_dir.iterdir()):
            if entry.name.startswith("."):
                continue
            if entry.is_file() and entry.suffix == ".php":
                yield entry
            elif entry.is_dir():
                for sub in sorted(entry.iterdir()):
                    if sub.is_file() and sub.suffix == ".php":
                        yield sub

    def discover_packages(self) -> Iterator[PackageRecord]:
        names = list(PLUGIN_META_HEADERS) + PLUGIN_VOCABULARY.names()

        for plugin_file in self._plugin_files():
            try:
                headers = read_file_headers(plugin_file, names)
            except OSError as e:
                logger.warning("Could not read %s: %s", plugin_file, e)
                continue

            if not headers["Plugin Name"]:
                continue

            yield PackageRecord(
                host_id=plugin_file.relative_to(self.plugins_dir).as_posix(),
                kind=UnitKind.INSTALLABLE_UNIT,
                headers={n: headers[n] for n in PLUGIN_VOCABULARY.names()},
                name=headers["Plugin Name"],
                author=headers["Author"],
                version=headers["Version"],
                description=headers["Description"],
            )


class ThemeDirectorySource:
    """Lists themes under the theme root.

    On a single site only directories with a valid ``style.css`` count as
    themes. A multisite network lists every directory under the shared
    theme root, since themes there need not be enabled on the main site.
    """

    def __init__(self, themes_dir: Path | str, multisite: bool = False):
        self.themes_dir = Path(themes_dir)
        self.multisite = multisite

    def _theme_dirs(self) -> Iterator[Path]:
        if not self.themes_dir.is_dir():
            logger.warning("Themes directory not found: %s", self.themes_dir)
            return

        for entry in sorted(self.themes_dir.iterdir()):
            if entry.name in IGNORED_ENTRIES or not entry.is_dir():
                continue
            yield entry

    def _read_theme(self, theme_dir: Path) -> PackageRecord | None:
        names = list(THEME_META_HEADERS) + THEME_VOCABULARY.names()
        stylesheet = theme_dir / "style.css"

        if stylesheet.is_file():
            try:
                headers = read_file_headers(stylesheet, names)
            except OSError as e:
                logger.warning("Could not read %s: %s", stylesheet, e)
                headers = {n: "" for n in names}
        else:
            headers = {n: "" for n in names}

        if not headers["Theme Name"] and not self.multisite:
            return None

        return PackageRecord(
            host_id=theme_dir.name,
            kind=UnitKind.APPEARANCE_UNIT,
            headers={n: headers[n] for n in THEME_VOCABULARY.names()},
            name=headers["Theme Name"] or theme_dir.name,
            author=headers["Author"],
            version=headers["Version"],
            description=headers["Description"],
        )

    def discover_packages(self) -> Iterator[PackageRecord]:
        for theme_dir in self._theme_dirs():
            record = self._read_theme(theme_dir)
            if record is not None:
                yield record
