"""Concurrent recursive directory-size aggregation."""

from __future__ import annotations

import logging
import os
import stat
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from .fs import describe_os_error, scan_directory
from .types import DirectoryScan, saturating_add

logger = logging.getLogger(__name__)


def default_max_workers() -> int:
    """Worker count matching the ``ThreadPoolExecutor`` default."""
    return min(32, (os.cpu_count() or 1) + 4)


class TreeSizeAggregator:
    """Sum file sizes under a path with one pool task per subdirectory.

    Each ``traverse`` frame owns its accumulator and combines child totals
    only through returned values. Subdirectories go to the pool while a
    worker slot is free and run inline in the calling thread otherwise.
    Every submitted task holds a slot, so it never waits in the queue
    behind a blocked parent.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        scan_directory: Callable[[Path], DirectoryScan] = scan_directory,
    ) -> None:
        if max_workers is None:
            max_workers = default_max_workers()
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers
        self._scan_directory = scan_directory

    def size_of(self, path: str | os.PathLike[str]) -> int:
        """Return total bytes for ``path``.

        ``path`` is stat'ed as given, so an empty string fails instead of
        meaning the current directory.

        Raises ``OSError`` only when ``path`` itself cannot be stat'ed.
        Errors below it are logged and contribute zero.
        """
        path_stat = os.stat(path)
        if not stat.S_ISDIR(path_stat.st_mode):
            return int(path_stat.st_size)
        return self.traverse(Path(path))

    def traverse(self, directory: Path) -> int:
        """Return total bytes of files below ``directory``, never raising for I/O."""
        slots = threading.BoundedSemaphore(self.max_workers)
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="rudex-traverse",
        )
        try:
            total = self._traverse(directory, executor, slots)
        except BaseException:
            # abandon in-flight subtrees
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        executor.shutdown()
        return total

    def _traverse_in_slot(
        self,
        directory: Path,
        executor: ThreadPoolExecutor,
        slots: threading.BoundedSemaphore,
    ) -> int:
        try:
            return self._traverse(directory, executor, slots)
        finally:
            slots.release()

    def _traverse(
        self,
        directory: Path,
        executor: ThreadPoolExecutor,
        slots: threading.BoundedSemaphore,
    ) -> int:
        scan = self._scan_directory(directory)
        if scan.scan_error is not None:
            logger.warning('"%s" %s', directory, describe_os_error(scan.scan_error))
            return 0
        for entry_path, exc in scan.entry_errors:
            logger.warning('"%s" %s', entry_path, describe_os_error(exc))

        total = scan.file_bytes
        pending: list[Future[int]] = []
        inline: list[Path] = []
        for subdirectory in scan.subdirectories:
            if slots.acquire(blocking=False):
                pending.append(executor.submit(self._traverse_in_slot, subdirectory, executor, slots))
            else:
                inline.append(subdirectory)

        for subdirectory in inline:
            total = saturating_add(total, self._traverse(subdirectory, executor, slots))
        for future in pending:
            total = saturating_add(total, future.result())

        logger.debug(
            "%s: %d bytes (%d pooled, %d inline)",
            directory,
            total,
            len(pending),
            len(inline),
        )
        return total


__all__ = [
    "TreeSizeAggregator",
    "default_max_workers",
]
