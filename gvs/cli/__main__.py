"""
Entry point for running the gvs CLI as a module.

Usage: python -m gvs.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
