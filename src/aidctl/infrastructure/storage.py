"""Storage directory bootstrap.

Creates the storage root and its fixed subdirectories, dropping a
``.gitkeep`` into each so empty directories survive version control.
Idempotent: existing directories and markers are left untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

GITKEEP = ".gitkeep"


def storage_directories(root: Path, subdirs: Iterable[str]) -> list[Path]:
    """Return the storage root followed by each subdirectory path."""
    return [root, *(root / name for name in subdirs)]


def init_storage(root: Path, subdirs: Iterable[str]) -> tuple[list[Path], list[Path]]:
    """Create *root* and *subdirs* beneath it.

    Returns ``(created, existing)`` directory lists.

    Raises:
        ValueError: If a subdirectory name escapes *root*.
        OSError: If a directory cannot be created.
    """
    created: list[Path] = []
    existing: list[Path] = []
    resolved_root = root.resolve()
    for directory in storage_directories(root, subdirs):
        if not directory.resolve().is_relative_to(resolved_root):
            msg = f"Storage subdirectory escapes root: {directory}"
            raise ValueError(msg)
        if directory.is_dir():
            existing.append(directory)
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(directory)
            logger.info("Created directory: %s", directory)
        marker = directory / GITKEEP
        if not marker.exists():
            marker.touch()
    return created, existing
