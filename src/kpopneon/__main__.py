"""Allow ``python -m kpopneon``."""

import sys

from kpopneon.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
