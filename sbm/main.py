#!/usr/bin/env python3
"""
Main entry point for the SBM toolkit.

This module serves as the console script entry point.
"""

import sys
from sbm.cli import main


if __name__ == "__main__":
    sys.exit(main())
