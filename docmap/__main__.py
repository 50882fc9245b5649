"""
Entry point for running docmap as a module.

Usage: python -m docmap [args]
"""

from docmap.cli import main

if __name__ == "__main__":
    main()
