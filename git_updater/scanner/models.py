"""Shared data models for installed-package enumeration."""

from dataclasses import dataclass, field

from ..headers.models import UnitKind


@dataclass
class PackageRecord:
    """One installed package as reported by the host."""
    host_id: str
    kind: UnitKind
    headers: dict[str, str] = field(default_factory=dict)
    name: str = ""
    author: str = ""
    version: str = ""
    description: str = ""
