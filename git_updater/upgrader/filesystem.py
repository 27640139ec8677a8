"""Filesystem operations used when renaming extracted archives."""

import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Filesystem(Protocol):
    """Moves directories atomically or not at all."""

    def move(self, source: Path | str, dest: Path | str, overwrite: bool = False) -> bool:
        ...


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


class LocalFilesystem:
    """Directory moves on the local disk.

    A move is a single ``os.rename``. An existing destination is first set
    aside under a hidden sibling name and put back if the rename fails, so
    a failed move leaves both paths as they were. Moves across devices fail
    instead of falling back to a copy.
    """

    def move(self, source: Path | str, dest: Path | str, overwrite: bool = False) -> bool:
        source = Path(source)
        dest = Path(dest)

        if not source.exists():
            logger.error("Cannot move %s: source does not exist", source)
            return False

        backup = None
        if dest.exists():
            if not overwrite:
                logger.error("Cannot move %s: %s already exists", source, dest)
                return False
            backup = dest.with_name(f".{dest.name}.{uuid.uuid4().hex[:8]}.old")
            try:
                os.rename(dest, backup)
            except OSError as e:
                logger.error("Cannot set aside %s: %s", dest, e)
                return False

        try:
            os.rename(source, dest)
        except OSError as e:
            logger.error("Cannot move %s to %s: %s", source, dest, e)
            if backup is not None:
                try:
                    os.rename(backup, dest)
                except OSError as restore_error:
                    logger.error(
                        "Could not restore %s from %s: %s", dest, backup, restore_error
                    )
            return False

        if backup is not None:
            try:
                _remove(backup)
            except OSError as e:
                logger.warning("Could not remove replaced copy %s: %s", backup, e)

        return True
