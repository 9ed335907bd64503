#!/usr/bin/python3

"""
Entry point script for Linepad.
"""

import sys

from src.linepad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
