"""Data models for the outcome of resolving a candidate."""

from dataclasses import dataclass, field
from pathlib import Path

ADDED = "added"
RENAMED = "renamed"
DUPLICATE = "duplicate"


@dataclass
class Resolution:
    """Represents what the name resolver did with one candidate."""

    source: Path
    flat_name: str  # name inserted, or the name of the kept copy for duplicates
    outcome: str  # added/renamed/duplicate
    duplicate_of: Path | None = None
    errors: list[str] = field(default_factory=list)
