"""
Import Organizer - Entry point for CLI execution.

Allows running the package as a module: python -m import_organizer
"""

from import_organizer.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
