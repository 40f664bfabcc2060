"""Filesystem scanning for one directory level of a size traversal."""

from __future__ import annotations

import os
from pathlib import Path

from .types import DirectoryScan, saturating_add


def describe_os_error(exc: OSError) -> str:
    """Return the OS error text for ``exc`` without the repeated filename."""
    return exc.strerror or str(exc)


def scan_directory(directory: Path) -> DirectoryScan:
    """List immediate children of ``directory`` and classify them.

    Symlinks are never followed: a link counts with its own ``lstat`` size.
    A failing listing yields an empty scan carrying ``scan_error``; a failing
    per-entry lookup only drops that entry and is kept in ``entry_errors``.
    """
    file_bytes = 0
    subdirectories: list[Path] = []
    entry_errors: list[tuple[Path, OSError]] = []

    try:
        with os.scandir(directory) as entries:
            for child in entries:
                child_path = Path(child.path)
                try:
                    if child.is_dir(follow_symlinks=False):
                        subdirectories.append(child_path)
                        continue
                    size = int(child.stat(follow_symlinks=False).st_size)
                except OSError as exc:
                    entry_errors.append((child_path, exc))
                    continue
                file_bytes = saturating_add(file_bytes, size)
    except OSError as exc:
        return DirectoryScan(directory=directory, scan_error=exc)

    return DirectoryScan(
        directory=directory,
        file_bytes=file_bytes,
        subdirectories=tuple(subdirectories),
        entry_errors=tuple(entry_errors),
    )


__all__ = [
    "describe_os_error",
    "scan_directory",
]
