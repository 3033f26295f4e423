#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine command line

Examples:
    python run.py play --quality medium
    python run.py suggest --quality best --state '{"board": ...}'
    echo '{"board": ...}' | python run.py move 3 --format camel
"""

import sys

from connect_four.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
