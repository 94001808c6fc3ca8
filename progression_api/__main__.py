"""Entry point for `python -m progression_api`."""

import sys

from progression_api.cli import main

if __name__ == "__main__":
    sys.exit(main())
