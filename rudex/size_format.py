"""Human-readable byte totals for CLI output."""

from __future__ import annotations

KILOBYTE = 1024
MEGABYTE = 1_048_576
GIGABYTE = 1_073_741_824


def format_size(total: int) -> str:
    """Format ``total`` bytes as a bare count or one-decimal ``K``/``Mb``/``Gb``."""
    if total < KILOBYTE:
        return str(total)
    if total < MEGABYTE:
        return f"{total / KILOBYTE:.1f}K"
    if total < GIGABYTE:
        return f"{total / MEGABYTE:.1f}Mb"
    return f"{total / GIGABYTE:.1f}Gb"


__all__ = ["KILOBYTE", "MEGABYTE", "GIGABYTE", "format_size"]
