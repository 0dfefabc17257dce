"""Base interface for raw filesystem adapters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class FileStat:
    """Subset of file metadata the resector needs."""
    size: int


class FileSystem(ABC):
    """Minimal binary filesystem capability set.

    All paths are sandbox-relative strings using '/' as separator. Failures
    are raised as ``OSError`` subclasses and classified by the caller.
    """

    #: Local directory backing the adapter, if any. Used for resolved-path
    #: containment checks; adapters without one rely on the textual rules.
    root: Optional[Path] = None

    @abstractmethod
    def read_binary(self, path: str) -> bytes:
        """Read a whole file."""

    @abstractmethod
    def write_binary(self, path: str, data: bytes) -> None:
        """Write ``data`` to ``path`` in a single call, replacing any content."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file or directory exists."""

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a file."""

    @abstractmethod
    def mkdir(self, path: str) -> None:
        """Create a single directory.

        Raises ``FileExistsError`` if it already exists.
        """

    @abstractmethod
    def stat(self, path: str) -> FileStat:
        """Return file metadata."""

    def is_dir(self, path: str) -> bool:
        """Check whether ``path`` is a directory.

        Adapters without a notion of directories may keep this default.
        """
        return self.exists(path)
