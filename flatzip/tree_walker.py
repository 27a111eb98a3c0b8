"""Depth-first directory traversal feeding matched files to the name resolver."""

import logging
from collections.abc import Iterable
from pathlib import Path

from flatzip.candidate import Candidate
from flatzip.errors import TraversalError
from flatzip.flat_namespace import FlatNamespace
from flatzip.name_resolver import NameResolver
from flatzip.pattern_filter import PatternFilter
from flatzip.resolution import Resolution

logger = logging.getLogger(__name__)


class TreeWalker:
    """Builds a flat namespace from every matching file under a root."""

    def __init__(
        self,
        pattern_filter: PatternFilter,
        resolver: NameResolver,
        *,
        sort_entries: bool = True,
        strict: bool = False,
        exclude: Iterable[str | Path] = (),
    ) -> None:
        """Initialize the walker.

        sort_entries orders each directory listing by name so suffix numbering
        does not depend on the platform's enumeration order. strict re-raises
        a subdirectory listing failure instead of skipping the subtree.
        exclude lists files that must never become candidates.
        """
        self.pattern_filter = pattern_filter
        self.resolver = resolver
        self.sort_entries = sort_entries
        self.strict = strict
        self.exclude = {Path(p).resolve() for p in exclude}

        self.resolutions: list[Resolution] = []
        self.errors: list[TraversalError] = []

    def walk(
        self, root: str | Path, namespace: FlatNamespace | None = None
    ) -> FlatNamespace:
        """Visit root and all its subdirectories, returning the namespace.

        Files of a directory are resolved before any of its subdirectories
        are entered. An empty namespace means nothing matched. resolutions and
        errors describe only the most recent walk.
        """
        root = Path(root)
        if not root.is_dir():
            raise TraversalError(root, "not an existing directory")
        if namespace is None:
            namespace = FlatNamespace()
        self.resolutions = []
        self.errors = []

        pending = [root]
        while pending:
            directory = pending.pop()
            try:
                files, subdirs = self._list_directory(directory)
            except TraversalError as exc:
                if directory == root or self.strict:
                    raise
                logger.warning("%s; skipping subtree.", exc)
                self.errors.append(exc)
                continue

            for path in files:
                if not self.pattern_filter.matches(path.name):
                    continue
                if self.exclude and path.resolve() in self.exclude:
                    logger.debug("Skipping excluded file %s", path)
                    continue
                res = self.resolver.resolve(namespace, Candidate.from_path(path))
                self.resolutions.append(res)

            # Stack: push in reverse so subdirectories pop in listing order.
            pending.extend(reversed(subdirs))

        return namespace

    def _list_directory(self, directory: Path) -> tuple[list[Path], list[Path]]:
        """Split a directory's immediate entries into files and subdirectories."""
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            raise TraversalError(directory, exc.strerror or str(exc)) from exc

        if self.sort_entries:
            entries.sort(key=lambda p: p.name)

        files: list[Path] = []
        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_dir():
                subdirs.append(entry)
            elif entry.is_file():
                files.append(entry)
        return files, subdirs
