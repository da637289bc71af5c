#!/usr/bin/env python3
"""
IndexEngine Runner Script.

Usage:
    python run.py templates              # List index templates
    python run.py project SPX            # Project the SPX template
    python run.py project NDX --risk aggressive --vol 0.3
    python run.py project SPX --json     # Result as JSON
    python run.py status                 # Show configuration
"""

import sys

from indexengine.cli import main

if __name__ == "__main__":
    sys.exit(main())
