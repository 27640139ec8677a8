"""Find GitHub and Bitbucket hosted plugins and themes and tidy their update archives."""

from .headers import Provider, RepoDescriptor, RepoDescriptorParser, UnitKind
from .scanner import DefaultsInitializer, InstalledUnitScanner, PackageRecord
from .upgrader import ArchiveReconciler, ReconcileResult

__all__ = [
    "Provider",
    "RepoDescriptor",
    "RepoDescriptorParser",
    "UnitKind",
    "DefaultsInitializer",
    "InstalledUnitScanner",
    "PackageRecord",
    "ArchiveReconciler",
    "ReconcileResult",
]
