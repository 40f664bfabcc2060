"""Public package surface for rudex.

Exports ``main`` for programmatic CLI invocation.
The size aggregator itself lives in ``rudex.tree_size``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
