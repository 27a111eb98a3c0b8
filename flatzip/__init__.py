"""Flatten a directory tree into one deduplicated ZIP archive.

Matching files are collected from every subdirectory, renamed on name
collisions, and dropped when they are byte-for-byte copies of a file
already collected.
"""

from flatzip.archive_assembler import write_archive
from flatzip.content_comparator import files_identical
from flatzip.errors import (
    ArchiveCreationError,
    ConfigError,
    FlatZipError,
    InvalidPatternError,
    TraversalError,
)
from flatzip.flat_namespace import FlatNamespace
from flatzip.name_resolver import NameResolver
from flatzip.pattern_filter import PatternFilter
from flatzip.tree_walker import TreeWalker

__all__ = [
    "ArchiveCreationError",
    "ConfigError",
    "FlatNamespace",
    "FlatZipError",
    "InvalidPatternError",
    "NameResolver",
    "PatternFilter",
    "TraversalError",
    "TreeWalker",
    "files_identical",
    "write_archive",
]
