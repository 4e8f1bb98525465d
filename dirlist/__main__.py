"""Module entrypoint for ``python -m dirlist``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output happen in ``dirlist.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
