"""Collect descriptors for every installed package that declares an origin."""

import logging
from dataclasses import replace
from typing import Iterable

from ..exceptions import MalformedDescriptor
from ..headers.models import RepoDescriptor, UnitKind
from ..headers.parser import RepoDescriptorParser
from ..headers.vocabulary import vocabulary_for
from .defaults import DefaultsInitializer
from .models import PackageRecord

logger = logging.getLogger(__name__)


class InstalledUnitScanner:
    """Builds the slug -> descriptor map for one scan pass."""

    def __init__(
        self,
        defaults: DefaultsInitializer | None = None,
        strict: bool = False,
    ):
        self.defaults = defaults or DefaultsInitializer()
        self.strict = strict
        self._parsers = {
            kind: RepoDescriptorParser(vocabulary_for(kind), strict=strict)
            for kind in UnitKind
        }

    @property
    def diagnostics(self) -> list[MalformedDescriptor]:
        """Malformed declarations seen since the scanner was created."""
        return [d for p in self._parsers.values() for d in p.diagnostics]

    def describe(self, package: PackageRecord) -> RepoDescriptor | None:
        """Parse one package and merge its host metadata, or return None."""
        descriptor = self._parsers[package.kind].parse(
            package.headers, host_id=package.host_id
        )
        if descriptor is None:
            return None

        # Display fields always come from the host, never from the header.
        descriptor = replace(
            descriptor,
            name=package.name,
            author=package.author,
            local_version=package.version,
            description=package.description,
        )
        return self.defaults.apply_defaults(descriptor)

    def scan(self, all_installed: Iterable[PackageRecord]) -> dict[str, RepoDescriptor]:
        """Return descriptors keyed by repo slug.

        A slug declared by more than one package keeps the package seen last.
        """
        descriptors: dict[str, RepoDescriptor] = {}

        for package in all_installed:
            descriptor = self.describe(package)
            if descriptor is None:
                continue

            previous = descriptors.get(descriptor.slug)
            if previous is not None:
                logger.warning(
                    "Slug %r declared by both %s and %s; keeping %s",
                    descriptor.slug,
                    previous.host_id,
                    descriptor.host_id,
                    descriptor.host_id,
                )
            descriptors[descriptor.slug] = descriptor

        logger.info("Found %d packages with a repository origin", len(descriptors))
        return descriptors
