"""Typed exceptions for lsfdocs."""


class LsfDocsError(Exception):
    """Base exception for lsfdocs failures."""


class PathMappingError(LsfDocsError):
    """Raised when a path argument cannot be safely mapped."""


class StartupValidationError(LsfDocsError):
    """Raised when startup arguments are invalid."""


class BaselineError(LsfDocsError):
    """Raised when the baseline collection cannot be read or is malformed."""


class DocumentError(LsfDocsError):
    """Raised when a single documentation page cannot be read."""


class OutputError(LsfDocsError):
    """Raised when the merged corpus cannot be written."""


class CommandIndexError(LsfDocsError):
    """Raised when no command data source can be loaded."""
