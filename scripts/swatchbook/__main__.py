"""
Entry point for running swatchbook as a module: python -m swatchbook
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
