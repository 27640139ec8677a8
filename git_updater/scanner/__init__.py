"""Installed-package enumeration and descriptor scanning."""

from .defaults import DefaultsInitializer
from .installed import InstalledUnitScanner
from .models import PackageRecord
from .sources import PluginDirectorySource, ThemeDirectorySource

__all__ = [
    "DefaultsInitializer",
    "InstalledUnitScanner",
    "PackageRecord",
    "PluginDirectorySource",
    "ThemeDirectorySource",
]
