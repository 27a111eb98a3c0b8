"""Exception hierarchy for flattening and archiving runs."""


class FlatZipError(Exception):
    """Base class for every error raised by flatzip."""


class InvalidPatternError(FlatZipError):
    """The filename pattern is not a valid regular expression."""


class ConfigError(FlatZipError):
    """The configuration file is malformed or holds invalid values."""


class TraversalError(FlatZipError):
    """A directory could not be enumerated."""

    def __init__(self, path: object, reason: str) -> None:
        """Record the directory that failed and why."""
        super().__init__(f"Cannot list directory {path}: {reason}")
        self.path = path
        self.reason = reason


class ArchiveCreationError(FlatZipError):
    """The destination archive could not be created or written."""


class ReportError(FlatZipError):
    """The run report could not be written."""
