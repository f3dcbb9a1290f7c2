"""
gqldocs package entry point.

Allows running gqldocs as a module:
    python -m gqldocs
"""

from gqldocs.cli import main

if __name__ == "__main__":
    main()
