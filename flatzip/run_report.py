"""JSON report of what a flattening run queued, renamed and dropped."""

import json
import time
from pathlib import Path
from typing import Any

from flatzip.errors import FlatZipError, ReportError, TraversalError
from flatzip.resolution import Resolution


class RunReport:
    """Collects resolutions and recovered errors for one run."""

    def __init__(self, config_hash: str, root: str | Path, pattern: str) -> None:
        """Initialize an empty report for a run over root with the given pattern."""
        self.config_hash = config_hash
        self.root = str(root)
        self.pattern = pattern
        self.resolutions: list[Resolution] = []
        self.errors: list[str] = []
        self.archive: str | None = None
        self.start_time = time.time()

    def add_resolution(self, resolution: Resolution) -> None:
        """Record one resolved candidate and any comparison errors it hit."""
        self.resolutions.append(resolution)
        self.errors.extend(resolution.errors)

    def add_traversal_error(self, error: TraversalError) -> None:
        """Record a subtree that was skipped because it could not be listed."""
        self.errors.append(str(error))

    def add_archive_error(self, error: FlatZipError) -> None:
        """Record why the archive could not be written."""
        self.errors.append(f"archive: {error}")

    def set_archive(self, path: str | Path) -> None:
        """Record where the archive was written."""
        self.archive = str(path)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as JSON-ready data."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "root": self.root,
                "pattern": self.pattern,
                "archive": self.archive,
                "total_candidates": len(self.resolutions),
            },
            "entries": [
                {
                    "source": str(r.source),
                    "flat_name": r.flat_name,
                    "outcome": r.outcome,
                    "duplicate_of": str(r.duplicate_of) if r.duplicate_of else None,
                }
                for r in self.resolutions
            ],
            "errors": list(self.errors),
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str | Path) -> None:
        """Write the report to path, creating missing parent directories."""
        p = Path(path)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write report {p}: {exc}"
            raise ReportError(msg) from exc

    def _compute_stats(self) -> dict[str, Any]:
        outcome_counts: dict[str, int] = {}
        for r in self.resolutions:
            outcome_counts[r.outcome] = outcome_counts.get(r.outcome, 0) + 1
        return {"outcome_counts": outcome_counts, "error_count": len(self.errors)}
