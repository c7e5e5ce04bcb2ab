"""Allow ``python -m music163``."""

import sys

from music163.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
