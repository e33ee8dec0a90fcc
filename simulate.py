#!/usr/bin/env python3
"""
Convenience entry point for the headless runner.

Usage:
    python simulate.py                        # Reference system, 1 simulated year
    python simulate.py --preset earth_sun     # Named preset
    python simulate.py --years 10             # Longer run
    python simulate.py --list                 # List presets
"""

import sys

from tools.simulate import main

if __name__ == "__main__":
    sys.exit(main())
