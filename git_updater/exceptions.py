"""Error taxonomy for git-updater."""


class GitUpdaterError(Exception):
    """Base class for all git-updater errors."""


class ConfigError(GitUpdaterError):
    """Configuration file is missing or invalid."""


class MalformedDescriptor(GitUpdaterError):
    """A declared repository URI lacks an owner or repo segment."""

    def __init__(self, uri: str, host_id: str | None = None):
        self.uri = uri
        self.host_id = host_id
        where = f" in {host_id}" if host_id else ""
        super().__init__(f"Malformed repository URI{where}: {uri!r}")


class AmbiguousArchiveMatch(GitUpdaterError):
    """An extracted archive name matched more than one known slug."""

    def __init__(self, dir_name: str, matches: list[str]):
        self.dir_name = dir_name
        self.matches = matches
        super().__init__(
            f"{dir_name!r} matches {len(matches)} repositories: {', '.join(matches)}"
        )


class RenameFailed(GitUpdaterError):
    """The filesystem refused to move an extracted archive."""

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(f"Unable to rename {source} to {destination}")
