"""Fingerprint of the effective configuration, recorded in run reports."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a SHA-256 digest that only changes when a setting changes.

    Keys are sorted before hashing; values JSON cannot encode are hashed by
    their string form.
    """
    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
