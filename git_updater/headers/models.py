"""Shared data models for repository descriptors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_CHANGELOG = (
    "No changelog is available via git-updater. "
    "Create a file CHANGES.md in your repository."
)


class Provider(str, Enum):
    """Supported version-control hosts."""

    GITHUB = "github"
    BITBUCKET = "bitbucket"

    @property
    def base_url(self) -> str:
        return PROVIDER_BASE_URLS[self]

    @property
    def label(self) -> str:
        return PROVIDER_LABELS[self]

    @property
    def default_branch(self) -> str:
        return "master"


PROVIDER_BASE_URLS = {
    Provider.GITHUB: "https://github.com",
    Provider.BITBUCKET: "https://bitbucket.org",
}

PROVIDER_LABELS = {
    Provider.GITHUB: "GitHub",
    Provider.BITBUCKET: "Bitbucket",
}


class UnitKind(str, Enum):
    """Kinds of installed host packages."""

    INSTALLABLE_UNIT = "installable_unit"  # plugin
    APPEARANCE_UNIT = "appearance_unit"  # theme

    @property
    def header_word(self) -> str:
        """Word used in the URI header name, e.g. 'GitHub Plugin URI'."""
        return "Plugin" if self is UnitKind.INSTALLABLE_UNIT else "Theme"


@dataclass
class RemoteState:
    """Remote-check fields, baselined every scan and later filled remotely."""
    remote_version: str = "0.0.0"
    newest_tag: str = "0.0.0"
    download_link: str = ""
    tags: list[str] = field(default_factory=list)
    rollback: dict[str, str] = field(default_factory=dict)
    changelog: str = DEFAULT_CHANGELOG
    requires: str | None = None
    tested: str | None = None
    downloaded: int = 0
    last_updated: str | None = None
    rating: int = 0
    num_ratings: int = 0
    transient: dict[str, Any] = field(default_factory=dict)
    repo_meta: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RepoDescriptor:
    """Normalized origin of one installed package.

    Identity and display fields are frozen; only ``remote`` is written
    after parsing, by whatever performs the remote check.
    """
    provider: Provider
    kind: UnitKind
    owner: str
    repo: str
    branch: str
    access_token: str | None = field(default=None, repr=False)
    host_id: str = ""
    name: str = ""
    author: str = ""
    local_version: str = ""
    description: str = ""
    remote: RemoteState = field(default_factory=RemoteState)

    @property
    def slug(self) -> str:
        return self.repo

    @property
    def canonical_uri(self) -> str:
        return f"{self.provider.base_url}/{self.owner}/{self.repo}"

    @property
    def is_private(self) -> bool:
        return self.access_token is not None

    def to_dict(self) -> dict:
        """Convert to a plain dictionary, leaving out the access token."""
        return {
            "provider": self.provider.value,
            "kind": self.kind.value,
            "owner": self.owner,
            "repo": self.repo,
            "canonical_uri": self.canonical_uri,
            "branch": self.branch,
            "private": self.is_private,
            "host_id": self.host_id,
            "name": self.name,
            "author": self.author,
            "local_version": self.local_version,
            "description": self.description,
        }
