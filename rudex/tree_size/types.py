"""Value types and arithmetic for directory-size accumulation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

U64_MAX = (1 << 64) - 1


def saturating_add(total: int, amount: int) -> int:
    """Add ``amount`` to ``total`` clamping at ``U64_MAX`` instead of wrapping."""
    return min(U64_MAX, total + amount)


@dataclass(frozen=True)
class DirectoryScan:
    """Result of listing one directory level.

    ``file_bytes`` already sums every non-directory child. ``scan_error`` is
    set when the listing itself failed, in which case the other fields are
    empty. ``entry_errors`` holds children whose metadata lookup failed.
    """

    directory: Path
    file_bytes: int = 0
    subdirectories: tuple[Path, ...] = ()
    scan_error: OSError | None = None
    entry_errors: tuple[tuple[Path, OSError], ...] = ()


__all__ = [
    "U64_MAX",
    "saturating_add",
    "DirectoryScan",
]
