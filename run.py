#!/usr/bin/env python3
"""
pokerrange - Command Line Startup Script

Usage:
    python run.py parse "22+,ATs-A6s"
    python run.py convert "AKs" --from shorthand --to combo
"""

import sys

from pokerrange.cli import main


if __name__ == "__main__":
    sys.exit(main())
