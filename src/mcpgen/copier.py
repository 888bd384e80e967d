"""Recursive template tree copy with exclusions and a self-containment guard."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .errors import CopyError, DestinationExistsError, TemplateNotFoundError

__all__ = ["TreeCopier", "is_within"]


LOGGER = logging.getLogger(__name__)


def is_within(path: Path, ancestor: Path) -> bool:
    """Return ``True`` when ``path`` equals ``ancestor`` or lies beneath it."""

    return path == ancestor or ancestor in path.parents


@dataclass(slots=True)
class TreeCopier:
    """Copy a directory tree, skipping excluded base names.

    Only directories and regular files are copied. Symbolic links and special
    files are skipped so link cycles can never be followed. File content is
    copied byte for byte; permissions and timestamps are not preserved.
    """

    excludes: tuple[str, ...] = field(default_factory=tuple)

    def __init__(self, excludes: Iterable[str] | None = None) -> None:
        self.excludes = tuple(dict.fromkeys(excludes or ()))

    def copy(self, source: str | Path, destination: str | Path) -> Path:
        """Copy ``source`` into ``destination`` and return the destination path.

        ``destination`` must not exist, except as an empty directory. Errors
        raised while writing abort the copy and leave what was already written
        in place.
        """

        source = Path(source)
        destination = Path(destination)

        if not source.exists():
            raise TemplateNotFoundError(source)
        if not source.is_dir():
            raise TemplateNotFoundError(source, "is not a directory")
        if destination.exists() and not _is_empty_dir(destination):
            raise DestinationExistsError(destination)

        try:
            destination.mkdir(parents=True, exist_ok=True)
            self._copy_children(source, destination)
        except OSError as exc:
            raise CopyError(f"Failed to copy {source} to {destination}: {exc}") from exc

        return destination

    def _copy_children(self, source: Path, destination: Path) -> None:
        for child in sorted(source.iterdir(), key=lambda item: item.name):
            if child.name in self.excludes:
                LOGGER.debug("skipping excluded %s", child)
                continue

            if child.is_symlink():
                LOGGER.debug("skipping symbolic link %s", child)
                continue

            # Re-checked at every level: the destination may sit anywhere below the source.
            target = destination / child.name
            if is_within(target.resolve(), child.resolve()):
                LOGGER.debug("skipping %s, destination %s lies inside it", child, target)
                continue

            if child.is_dir():
                target.mkdir()
                self._copy_children(child, target)
            elif child.is_file():
                shutil.copyfile(child, target)
            else:
                LOGGER.debug("skipping special file %s", child)


def _is_empty_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink() and not any(path.iterdir())
