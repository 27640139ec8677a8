"""Parse declared header fields into a RepoDescriptor."""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping
from urllib.parse import urlsplit

from ..exceptions import MalformedDescriptor
from .models import Provider, RepoDescriptor
from .vocabulary import PROVIDER_ORDER, HeaderRole, HeaderVocabulary

logger = logging.getLogger(__name__)


@dataclass
class ProviderCandidate:
    """Fields collected from one provider's headers."""
    provider: Provider
    uri: str = ""
    owner: str = ""
    repo: str = ""
    branch: str | None = None
    access_token: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.owner and self.repo)


def split_owner_repo(uri: str) -> tuple[str, str]:
    """Return ``(owner, repo)`` from the path of a repository URI.

    Only the path is consulted, so ``https://github.com/acme/widget`` and
    ``acme/widget`` give the same result. Missing segments, or a URI that
    cannot be split at all, come back empty.
    """
    try:
        path = urlsplit(uri.strip()).path.strip("/")
    except ValueError:
        return "", ""
    segments = path.split("/") if path else []
    owner = segments[0] if segments else ""
    repo = segments[1] if len(segments) > 1 else ""
    return owner, repo


def _set_uri(candidate: ProviderCandidate, value: str) -> None:
    candidate.uri = value
    candidate.owner, candidate.repo = split_owner_repo(value)


def _set_branch(candidate: ProviderCandidate, value: str) -> None:
    candidate.branch = value


def _set_access_token(candidate: ProviderCandidate, value: str) -> None:
    candidate.access_token = value


SETTERS: dict[HeaderRole, Callable[[ProviderCandidate, str], None]] = {
    HeaderRole.URI: _set_uri,
    HeaderRole.BRANCH: _set_branch,
    HeaderRole.ACCESS_TOKEN: _set_access_token,
}


class RepoDescriptorParser:
    """Turns a package's declared header fields into a descriptor.

    Each provider is evaluated in ``PROVIDER_ORDER`` into its own candidate.
    When more than one provider is declared, the candidate evaluated last
    wins outright, so a package declaring both GitHub and Bitbucket URIs
    resolves to Bitbucket.
    """

    def __init__(self, vocabulary: HeaderVocabulary, strict: bool = False):
        self.vocabulary = vocabulary
        self.strict = strict
        self.diagnostics: list[MalformedDescriptor] = []

    def parse_candidates(
        self,
        declared_fields: Mapping[str, str],
    ) -> list[ProviderCandidate]:
        """Build one candidate per provider that declares a URI."""
        candidates = []

        for provider in PROVIDER_ORDER:
            uri = (declared_fields.get(self.vocabulary.uri_field(provider).name) or "").strip()
            if not uri:
                continue

            candidate = ProviderCandidate(provider=provider)
            for header in self.vocabulary.fields_for(provider):
                value = (declared_fields.get(header.name) or "").strip()
                if not value:
                    continue
                SETTERS[header.role](candidate, value)
            candidates.append(candidate)

        return candidates

    def select(self, candidates: list[ProviderCandidate]) -> ProviderCandidate | None:
        """Pick the winning candidate: the last provider evaluated."""
        return candidates[-1] if candidates else None

    def parse(
        self,
        declared_fields: Mapping[str, str],
        host_id: str | None = None,
    ) -> RepoDescriptor | None:
        """Parse declared fields, returning None when nothing usable is declared."""
        candidates = self.parse_candidates(declared_fields)
        winner = self.select(candidates)
        if winner is None:
            return None

        if len(candidates) > 1:
            logger.debug(
                "%s declares %s; using %s",
                host_id or "package",
                ", ".join(c.provider.value for c in candidates),
                winner.provider.value,
            )

        if not winner.is_complete:
            error = MalformedDescriptor(winner.uri, host_id)
            if self.strict:
                raise error
            logger.warning("Skipping %s", error)
            self.diagnostics.append(error)
            return None

        return RepoDescriptor(
            provider=winner.provider,
            kind=self.vocabulary.kind,
            owner=winner.owner,
            repo=winner.repo,
            branch=winner.branch or winner.provider.default_branch,
            access_token=winner.access_token,
            host_id=host_id or "",
        )
