#!/usr/bin/env python3
"""
fuzzyselect - fuzzy matching and ranking for combo-box style pickers

This is a convenience wrapper for running from the repo root.
The actual entry point is fuzzyselect.main:main (for pip install).
"""

import sys

from fuzzyselect.main import main

if __name__ == "__main__":
    sys.exit(main())
