"""Writes the flat namespace out as a ZIP archive."""

import logging
import os
import zipfile
from pathlib import Path

from flatzip.errors import ArchiveCreationError
from flatzip.flat_namespace import FlatNamespace

logger = logging.getLogger(__name__)

COMPRESSION_METHODS = {
    "stored": zipfile.ZIP_STORED,
    "deflated": zipfile.ZIP_DEFLATED,
    "bzip2": zipfile.ZIP_BZIP2,
    "lzma": zipfile.ZIP_LZMA,
}


def archive_entry_name(flat_name: str) -> str:
    """Return an entry name zipfile can encode, even for undecodable names.

    Bytes that are not valid UTF-8 are spelled out as ``\\xNN`` escapes.
    """
    return os.fsencode(flat_name).decode("utf-8", "backslashreplace")


def partial_path_for(destination: Path) -> Path:
    """Return the hidden sibling file the archive is built in."""
    return destination.with_name(f".{destination.name}.part")


def write_archive(
    namespace: FlatNamespace,
    destination: str | Path,
    *,
    compression: str = "deflated",
    overwrite: bool = False,
) -> Path:
    """Archive every namespace entry under its flat name.

    The archive is built in a temporary file next to the destination and
    moved into place only once every entry has been written, so a failed run
    never leaves a partial archive behind.
    """
    destination = Path(destination)
    if compression not in COMPRESSION_METHODS:
        msg = f"Unknown compression method: {compression}"
        raise ArchiveCreationError(msg)
    if destination.exists() and not overwrite:
        msg = f"Output file already exists: {destination}"
        raise ArchiveCreationError(msg)

    tmp_path = partial_path_for(destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        fh = tmp_path.open("wb")
    except OSError as exc:
        msg = f"Cannot create {destination}: {exc}"
        raise ArchiveCreationError(msg) from exc

    try:
        with fh, zipfile.ZipFile(
            fh, "w", COMPRESSION_METHODS[compression], strict_timestamps=False
        ) as zf:
            for flat_name, source in namespace.items():
                logger.info("Compressing %s as %s", source, flat_name)
                zf.write(source, archive_entry_name(flat_name))
        os.replace(tmp_path, destination)
    except (OSError, ValueError) as exc:
        tmp_path.unlink(missing_ok=True)
        msg = f"Failed writing {destination}: {exc}"
        raise ArchiveCreationError(msg) from exc

    logger.debug("Wrote %d entries to %s", len(namespace), destination)
    return destination
