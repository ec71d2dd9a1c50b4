"""Entry point for python -m layercheck."""

import sys

from layercheck.presentation.cli import main

if __name__ == "__main__":
    sys.exit(main())
