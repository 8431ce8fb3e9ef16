#!/usr/bin/env python3
"""as2cs — renders resolved ActionScript class models as C#.

Thin entry point that delegates to src.converter.main.
"""

import sys

from src.converter.main import main

if __name__ == "__main__":
    sys.exit(main())
