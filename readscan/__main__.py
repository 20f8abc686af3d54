"""Main entry point for running readscan as a module.

Usage:
    python -m readscan '[a-z]+' words.txt --skip '\s+'
"""

import sys

from readscan.cli import main

sys.exit(main())
