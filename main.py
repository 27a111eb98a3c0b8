"""Command-line entry point for building a flat, deduplicated archive.

Usage:
    python main.py -o photos.zip -r "\.jpe?g$" -p ~/Pictures
"""

from flatzip.flat_zipper import main

if __name__ == "__main__":
    raise SystemExit(main())
