"""Baseline remote-state values for freshly scanned descriptors."""

from dataclasses import replace

from ..headers.models import DEFAULT_CHANGELOG, RemoteState, RepoDescriptor


class DefaultsInitializer:
    """Resets the remote-state fields of a descriptor before any remote check."""

    def __init__(self, changelog_placeholder: str = DEFAULT_CHANGELOG):
        self.changelog_placeholder = changelog_placeholder

    def baseline(self) -> RemoteState:
        return RemoteState(changelog=self.changelog_placeholder)

    def apply_defaults(self, descriptor: RepoDescriptor) -> RepoDescriptor:
        """Return a copy of ``descriptor`` with a fresh baseline remote state."""
        return replace(descriptor, remote=self.baseline())
