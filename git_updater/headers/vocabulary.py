"""Recognized origin-declaration header names."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .models import Provider, UnitKind

# Evaluation order of providers. Later providers take precedence.
PROVIDER_ORDER = (Provider.GITHUB, Provider.BITBUCKET)


class HeaderRole(str, Enum):
    """What a declaration header sets on a descriptor."""

    URI = "uri"
    BRANCH = "branch"
    ACCESS_TOKEN = "access_token"


ROLE_ORDER = (HeaderRole.URI, HeaderRole.BRANCH, HeaderRole.ACCESS_TOKEN)


@dataclass(frozen=True)
class HeaderField:
    """One recognized header name."""
    name: str
    provider: Provider
    role: HeaderRole


def _header_name(provider: Provider, role: HeaderRole, kind: UnitKind) -> str:
    if role is HeaderRole.URI:
        return f"{provider.label} {kind.header_word} URI"
    if role is HeaderRole.BRANCH:
        return f"{provider.label} Branch"
    return f"{provider.label} Access Token"


class HeaderVocabulary:
    """Fixed table of header fields for one package kind."""

    def __init__(self, kind: UnitKind):
        self.kind = kind
        self._fields: tuple[HeaderField, ...] = tuple(
            HeaderField(_header_name(provider, role, kind), provider, role)
            for provider in PROVIDER_ORDER
            for role in ROLE_ORDER
        )
        self._by_name = {f.name: f for f in self._fields}

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> HeaderField | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [f.name for f in self._fields]

    def fields_for(self, provider: Provider) -> tuple[HeaderField, ...]:
        """Fields of one provider, in role order."""
        return tuple(f for f in self._fields if f.provider is provider)

    def uri_field(self, provider: Provider) -> HeaderField:
        return next(
            f for f in self.fields_for(provider) if f.role is HeaderRole.URI
        )

    def extend_headers(self, existing: Iterable[str] | None) -> list[str]:
        """Append the recognized names to a host's extra-header list."""
        headers = [h.strip() for h in (existing or [])]
        for name in self.names():
            if name not in headers:
                headers.append(name)
        return headers


PLUGIN_VOCABULARY = HeaderVocabulary(UnitKind.INSTALLABLE_UNIT)
THEME_VOCABULARY = HeaderVocabulary(UnitKind.APPEARANCE_UNIT)


def vocabulary_for(kind: UnitKind) -> HeaderVocabulary:
    """Return the shared vocabulary for a package kind."""
    if kind is UnitKind.INSTALLABLE_UNIT:
        return PLUGIN_VOCABULARY
    return THEME_VOCABULARY
