"""The flat namespace: archive entry names mapped to the files they come from."""

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class FlatNamespace:
    """Insertion-ordered, insert-only mapping of flat name to source path.

    Names are case-sensitive. Once a name is taken it keeps pointing at the
    same source for the rest of the run.
    """

    def __init__(self) -> None:
        """Start with an empty namespace."""
        self.mapping: dict[str, Path] = {}

    def __contains__(self, flat_name: object) -> bool:
        """Return True if the flat name is taken."""
        return flat_name in self.mapping

    def __getitem__(self, flat_name: str) -> Path:
        """Return the source path behind a taken flat name."""
        return self.mapping[flat_name]

    def __len__(self) -> int:
        """Return the number of flat names taken."""
        return len(self.mapping)

    def __iter__(self) -> Iterator[str]:
        """Iterate over flat names in insertion order."""
        return iter(self.mapping)

    def lookup(self, flat_name: str) -> Path | None:
        """Return the source path behind a flat name, if it is taken."""
        return self.mapping.get(flat_name)

    def insert(self, flat_name: str, source: Path) -> None:
        """Claim a flat name for a source path.

        Raises KeyError if the name is already taken.
        """
        if flat_name in self.mapping:
            msg = f"Flat name already taken: {flat_name} -> {self.mapping[flat_name]}"
            raise KeyError(msg)
        self.mapping[flat_name] = source
        logger.debug("Namespace[%s] = %s", flat_name, source)

    def items(self) -> list[tuple[str, Path]]:
        """Return (flat name, source path) pairs in insertion order."""
        return list(self.mapping.items())
