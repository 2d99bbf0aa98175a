"""
Package entry point.

Allows running the application via:

    python -m eduplan

This simply forwards execution to eduplan.cli.main().
"""

from eduplan.cli import main

if __name__ == "__main__":
    main()
