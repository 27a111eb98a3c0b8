"""Places candidates into the flat namespace, renaming or dropping on collision."""

import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path

from flatzip.candidate import Candidate
from flatzip.content_comparator import DEFAULT_CHUNK_SIZE, files_identical
from flatzip.flat_name import split_flat_name, suffixed_name
from flatzip.flat_namespace import FlatNamespace
from flatzip.resolution import ADDED, DUPLICATE, RENAMED, Resolution

logger = logging.getLogger(__name__)

Comparator = Callable[[Path, Path], bool]


class NameResolver:
    """Resolves flat-name collisions between candidates.

    A colliding candidate whose bytes match the file already holding the name
    is a duplicate and is dropped. Any other collision moves on to the next
    numeric suffix (``stem_2.ext``, ``stem_3.ext``, ...) until a free name or
    an identical file is found.
    """

    def __init__(
        self,
        comparator: Comparator | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize with a content comparator (chunked byte compare by default)."""
        self.comparator = comparator or partial(files_identical, chunk_size=chunk_size)

    def resolve(self, namespace: FlatNamespace, candidate: Candidate) -> Resolution:
        """Integrate one candidate into the namespace, mutating it in place."""
        stem, extension = split_flat_name(candidate.flat_name)
        index = 1
        attempt = suffixed_name(stem, extension, index)
        errors: list[str] = []

        while True:
            existing = namespace.lookup(attempt)
            if existing is None:
                namespace.insert(attempt, candidate.path)
                logger.info("Queueing %s as %s.", candidate.path, attempt)
                return Resolution(
                    source=candidate.path,
                    flat_name=attempt,
                    outcome=ADDED if index == 1 else RENAMED,
                    errors=errors,
                )

            if self._identical(existing, candidate.path, errors):
                logger.info(
                    "%s is a duplicate of %s, not archiving.", candidate.path, existing
                )
                return Resolution(
                    source=candidate.path,
                    flat_name=attempt,
                    outcome=DUPLICATE,
                    duplicate_of=existing,
                    errors=errors,
                )

            index += 1
            attempt = suffixed_name(stem, extension, index)

    def _identical(self, existing: Path, incoming: Path, errors: list[str]) -> bool:
        """Compare two files, treating an unreadable pair as different."""
        try:
            return self.comparator(existing, incoming)
        except OSError as exc:
            logger.warning(
                "Could not compare %s with %s (%s); keeping both.",
                existing,
                incoming,
                exc,
            )
            errors.append(f"compare {existing}: {exc}")
            return False
