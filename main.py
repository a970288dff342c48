#!/usr/bin/env python3
"""
Function Test Harness - Demonstration Entry Point

Runs the documented example series against the harness and reports the
outcome on standard output.
"""

from functest.cli import main

if __name__ == "__main__":
    main()
