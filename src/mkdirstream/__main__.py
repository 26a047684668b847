"""Allow ``python -m mkdirstream``."""

import sys

from mkdirstream.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
