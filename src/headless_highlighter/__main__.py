#!/usr/bin/env python3
"""Entry point for running headless_highlighter as a module.

This allows the package to be executed as:
    python -m headless_highlighter [arguments]
"""

import sys

from headless_highlighter.cli import main

if __name__ == "__main__":
    sys.exit(main())
