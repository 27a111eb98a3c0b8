"""Logic for loading, merging and validating configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from flatzip.archive_assembler import COMPRESSION_METHODS
from flatzip.content_comparator import DEFAULT_CHUNK_SIZE
from flatzip.deep_merge import deep_merge
from flatzip.errors import ConfigError

logger = logging.getLogger(__name__)

WORD_SIZE = 8

DEFAULT_CONFIG: dict[str, Any] = {
    "traversal": {
        "sort_entries": True,
        "strict": False,
    },
    "comparison": {
        "chunk_size": DEFAULT_CHUNK_SIZE,
    },
    "archive": {
        "compression": "deflated",
        "overwrite": False,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            logger.warning("Config file %s not found; using defaults.", p)
            return config
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in {p}: {exc}"
            raise ConfigError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"Config file {p} must contain a mapping at the top level"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Reject values the rest of the pipeline cannot work with."""
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            msg = f"Config section '{section}' must be a mapping"
            raise ConfigError(msg)

    chunk_size = config["comparison"].get("chunk_size")
    if (
        not isinstance(chunk_size, int)
        or isinstance(chunk_size, bool)
        or chunk_size <= 0
        or chunk_size % WORD_SIZE
    ):
        msg = (
            f"comparison.chunk_size must be a positive multiple of {WORD_SIZE}, "
            f"got {chunk_size!r}"
        )
        raise ConfigError(msg)

    compression = config["archive"].get("compression")
    if compression not in COMPRESSION_METHODS:
        allowed = ", ".join(sorted(COMPRESSION_METHODS))
        msg = f"archive.compression must be one of {allowed}, got {compression!r}"
        raise ConfigError(msg)

    level = config["logging"].get("level")
    if not isinstance(level, str) or level.upper() not in {
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "CRITICAL",
    }:
        msg = f"logging.level is not a logging level name: {level!r}"
        raise ConfigError(msg)
