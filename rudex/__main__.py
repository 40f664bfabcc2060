"""Module entrypoint for ``python -m rudex``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and logging setup happen in ``rudex.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
