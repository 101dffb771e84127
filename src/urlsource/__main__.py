"""Allow ``python -m urlsource``."""

import sys

from urlsource.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
