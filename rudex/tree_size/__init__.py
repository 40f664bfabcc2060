"""Directory-size aggregation over filesystem trees.

This package contains the non-CLI core:
- one-level directory scanning with per-entry error capture
- saturating byte accumulation helpers
- the concurrent recursive aggregator
"""

from __future__ import annotations

from .types import U64_MAX, DirectoryScan, saturating_add
from .fs import describe_os_error, scan_directory
from .aggregator import TreeSizeAggregator, default_max_workers

__all__ = [
    "U64_MAX",
    "DirectoryScan",
    "saturating_add",
    "describe_os_error",
    "scan_directory",
    "TreeSizeAggregator",
    "default_max_workers",
]
