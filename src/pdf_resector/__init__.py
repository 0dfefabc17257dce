"""Extract page ranges from PDFs into new files inside a sandbox."""

from .config import Settings, get_settings
from .errors import (
    ConflictError,
    LoadError,
    PageRangeError,
    PathTraversalError,
    PersistError,
    ResectorError,
    SafetyError,
    SerializationError,
    SizeExceededError,
    StorageIOError,
    VerificationError,
)
from .splitter import PDFSplitter

__version__ = "0.1.0"

__all__ = [
    "ConflictError",
    "LoadError",
    "PDFSplitter",
    "PageRangeError",
    "PathTraversalError",
    "PersistError",
    "ResectorError",
    "SafetyError",
    "SerializationError",
    "Settings",
    "SizeExceededError",
    "StorageIOError",
    "VerificationError",
    "get_settings",
]
