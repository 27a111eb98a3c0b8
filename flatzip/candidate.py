"""Data model for a file waiting to be placed in the flat namespace."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Candidate:
    """A matched file and the flat name it would like to have."""

    path: Path
    flat_name: str  # base name, directories stripped

    @classmethod
    def from_path(cls, path: Path) -> "Candidate":
        """Build a candidate proposing the file's own base name."""
        return cls(path=path, flat_name=path.name)
