"""Orchestration logic for flattening a directory tree into one archive."""

import argparse
import logging
from pathlib import Path
from typing import Any

from flatzip.archive_assembler import write_archive
from flatzip.compute_config_hash import compute_config_hash
from flatzip.deep_merge import deep_merge
from flatzip.errors import ArchiveCreationError
from flatzip.flat_namespace import FlatNamespace
from flatzip.load_config import load_config
from flatzip.name_resolver import NameResolver
from flatzip.pattern_filter import PatternFilter
from flatzip.run_report import RunReport
from flatzip.tree_walker import TreeWalker

logger = logging.getLogger(__name__)


def run_flatten(
    args: argparse.Namespace, config: dict[str, Any] | None = None
) -> int:
    """Execute the full collect, deduplicate and archive pipeline."""
    config = _init_config(args, config)
    pattern_filter = PatternFilter(args.regex)
    report = RunReport(compute_config_hash(config), args.path, args.regex)

    namespace = build_namespace(
        args.path, pattern_filter, config, report, exclude=[args.output]
    )

    if len(namespace) == 0:
        _write_report(report, args.report)
        print("No files found.")
        return 0

    if args.dry_run:
        _write_report(report, args.report)
        print(f"Dry run: {len(namespace)} files would be archived into {args.output}")
        return 0

    try:
        write_archive(
            namespace,
            args.output,
            compression=config["archive"]["compression"],
            overwrite=config["archive"]["overwrite"],
        )
    except ArchiveCreationError as exc:
        report.add_archive_error(exc)
        _write_report(report, args.report)
        raise
    report.set_archive(args.output)
    _write_report(report, args.report)

    print(f"Archived {len(namespace)} files into {args.output}")
    print("All done.")
    return 0


def _write_report(report: RunReport, path: Path | None) -> None:
    """Write the run report if one was requested."""
    if path:
        report.generate_report(path)
        logger.info("Run report written to %s", path)


def _init_config(
    args: argparse.Namespace, config: dict[str, Any] | None
) -> dict[str, Any]:
    """Load configuration unless given one, then apply command-line overrides."""
    if config is None:
        config = load_config(args.config)
    if args.overwrite:
        config = deep_merge(config, {"archive": {"overwrite": True}})
    return config


def build_namespace(
    root: str | Path,
    pattern_filter: PatternFilter,
    config: dict[str, Any],
    report: RunReport | None = None,
    exclude: list[str | Path] | None = None,
) -> FlatNamespace:
    """Walk root and return the deduplicated flat namespace of matching files."""
    resolver = NameResolver(chunk_size=config["comparison"]["chunk_size"])
    walker = TreeWalker(
        pattern_filter,
        resolver,
        sort_entries=config["traversal"]["sort_entries"],
        strict=config["traversal"]["strict"],
        exclude=exclude or [],
    )
    namespace = walker.walk(root)

    if report is not None:
        for res in walker.resolutions:
            report.add_resolution(res)
        for err in walker.errors:
            report.add_traversal_error(err)

    return namespace
