"""Entry point for ``python -m memberdoc``."""

import sys

from memberdoc.cli import main

if __name__ == "__main__":
    sys.exit(main())
