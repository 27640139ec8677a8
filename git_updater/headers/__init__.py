"""Header vocabulary and descriptor parsing."""

from .models import Provider, RemoteState, RepoDescriptor, UnitKind
from .parser import RepoDescriptorParser
from .vocabulary import HeaderVocabulary, vocabulary_for

__all__ = [
    "Provider",
    "RemoteState",
    "RepoDescriptor",
    "UnitKind",
    "RepoDescriptorParser",
    "HeaderVocabulary",
    "vocabulary_for",
]
