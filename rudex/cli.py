"""Command-line front door for rudex.

Parses path arguments, resolves worker and error-policy settings from flags
and config, then prints one size line per path using the aggregator.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .size_format import format_size
from .tree_size import TreeSizeAggregator, describe_os_error

LOGGER_NAME = "rudex"
LOG_FORMAT = "Rudex: %(message)s"

USAGE = """
Rudex (Rust-indexer): Simple multi-threaded Filesystem traverser
USAGE:
    rudex <path to dir/file>
    rudex -- <path starting with ->
    Ex: rudex /home/user1
        rudex /home/user1 /home/user2
OPTIONS:
    --help: Prints this message
    -j, --jobs N: Maximum number of worker threads
    -k, --keep-going: Report unreadable paths and continue with the rest
    -v, --verbose: Log per-directory traversal details"""

logger = logging.getLogger(LOGGER_NAME)
_HANDLER: logging.Handler | None = None


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(verbose: bool = False) -> None:
    """Attach a single stderr handler to the ``rudex`` logger."""
    global _HANDLER
    if _HANDLER is None:
        _HANDLER = logging.StreamHandler()
        _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit 1 like any other bad input."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="rudex", add_help=False)
    parser.add_argument("paths", nargs="*", metavar="path")
    parser.add_argument("--help", "-help", dest="show_help", action="store_true")
    parser.add_argument("-j", "--jobs", type=_positive_int, default=None)
    parser.add_argument("-k", "--keep-going", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main() -> None:
    """Parse CLI arguments and print the total size of each path.

    Exits 1 when no path is given or a path cannot be stat'ed. Without
    ``--keep-going`` the first such path stops processing; with it, the
    remaining paths are still printed before exiting 1.
    """
    args = _build_parser().parse_args()
    configure_logging(args.verbose)

    if args.show_help:
        print(USAGE)
        raise SystemExit(0)
    if not args.paths:
        logger.error("No args provided, for usage do: --help")
        raise SystemExit(1)

    max_workers = args.jobs if args.jobs is not None else config.load_max_workers()
    keep_going = args.keep_going or config.load_keep_going()
    aggregator = TreeSizeAggregator(max_workers=max_workers)

    failed = False
    for fname in args.paths:
        try:
            total_size = aggregator.size_of(fname)
        except OSError as exc:
            logger.error('"%s" %s', fname, describe_os_error(exc))
            if not keep_going:
                raise SystemExit(1)
            failed = True
            continue
        print(f"{fname} size: {format_size(total_size)}")

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
