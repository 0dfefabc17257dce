"""Exception types raised by the resector core."""

from typing import Optional


class ResectorError(Exception):
    """Base class for every failure surfaced to callers."""


class PathTraversalError(ResectorError):
    """Path escapes the sandbox or contains an illegal segment."""

    def __init__(self, message: str, candidate: str = "", segment: Optional[str] = None):
        super().__init__(message)
        self.candidate = candidate
        self.segment = segment


class PageRangeError(ResectorError):
    """Page bounds are invalid for the source document.

    ``bound`` is one of ``"start"``, ``"end"`` or ``"order"``.
    """

    def __init__(self, message: str, bound: str):
        super().__init__(message)
        self.bound = bound


class SizeExceededError(ResectorError):
    """Source document is larger than the configured ceiling."""

    def __init__(self, message: str, size: int, limit: int):
        super().__init__(message)
        self.size = size
        self.limit = limit


class LoadError(ResectorError):
    """Source bytes could not be decoded as a document."""


class ConflictError(ResectorError):
    """Output file exists and the caller did not resolve the conflict."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class SafetyError(ResectorError):
    """Output path preparation failed; ``cause`` holds the underlying error."""

    def __init__(self, message: str, cause: Exception):
        super().__init__(f"{message}: {cause}")
        self.cause = cause


class StorageIOError(ResectorError):
    """A read, write, mkdir or remove call on the filesystem adapter failed."""


class PersistError(ResectorError):
    """Base for failures specific to the persistence protocol."""


class SerializationError(PersistError):
    """The in-memory document could not be encoded to bytes."""


class VerificationError(PersistError):
    """The output file is missing even though the write reported success."""
