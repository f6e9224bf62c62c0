#!/usr/bin/env python3
"""
bug-collection: command-line access to saved bug collection XML files.

Usage:
    python bug-collection.py summary path/to/bugs.xml

This file is a thin wrapper around the cli package.
For the library itself, see the bug_platform/ directory.
"""

from cli.commands import main

if __name__ == "__main__":
    main()
