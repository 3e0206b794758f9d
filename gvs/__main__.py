"""
Entry point for running gvs as a module.

Usage: python -m gvs [command] [options]
"""

from gvs.cli.parser import main

if __name__ == "__main__":
    main()
