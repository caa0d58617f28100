"""Allow ``python -m blackd_client``."""

import sys

from blackd_client.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
