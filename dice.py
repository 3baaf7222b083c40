#!/usr/bin/env python3
"""dice — a syntax and lint checker for the Dice scripting language.

Thin entry point that delegates to compiler.python.main.
"""

import sys

from src.compiler.python.main import main

if __name__ == "__main__":
    sys.exit(main())
