"""Helpers for splitting and suffixing flat archive names."""


def split_flat_name(name: str) -> tuple[str, str]:
    """Split a base name into (stem, extension), keeping the dot on the extension.

    The extension starts at the last dot, even a leading one:
    ``archive.tar.gz`` -> (``archive.tar``, ``.gz``),
    ``.bashrc`` -> (``""``, ``.bashrc``).
    A name without a dot, or ending in one, has no extension.
    """
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return name, ""
    return name[:dot], name[dot:]


def suffixed_name(stem: str, extension: str, index: int) -> str:
    """Return the flat name for the index-th distinct file sharing a stem."""
    if index <= 1:
        return stem + extension
    return f"{stem}_{index}{extension}"
