"""Allow ``python -m zzsleep``."""

import sys

from zzsleep.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
