"""
Main entry point for the Catalyst package when executed as a module.

This allows running the package with `python -m catalyst`.
"""

from catalyst.cli import main

if __name__ == '__main__':
    main()
