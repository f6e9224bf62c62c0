"""
Entry point for running the bug collection CLI as a module.

Usage:
    python -m cli check path/to/bugs.xml
    python -m cli summary path/to/bugs.xml
    python -m cli upgrade old.xml new.xml
    python -m cli export-json path/to/bugs.xml --output bugs.json
"""

from .commands import main

if __name__ == "__main__":
    main()
