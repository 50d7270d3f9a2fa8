"""Entry point for running kanaweather as a module: python -m kanaweather."""

import sys

from kanaweather.cli import main

if __name__ == "__main__":
    sys.exit(main())
