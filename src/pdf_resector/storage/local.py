"""Filesystem adapter backed by a local directory."""

import os
from pathlib import Path

from ..errors import PathTraversalError
from .base import FileStat, FileSystem


class LocalFileSystem(FileSystem):
    """Reads and writes files beneath a fixed sandbox root."""

    def __init__(self, root: Path):
        """Initialize the adapter.

        Args:
            root: Sandbox root directory (created if missing)
        """
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def resolve(self, path: str) -> Path:
        """Map a sandbox-relative path to an absolute path under the root.

        Args:
            path: Sandbox-relative path

        Returns:
            Resolved absolute path

        Raises:
            PathTraversalError: If the result escapes the root
        """
        candidate = (self.root / path.lstrip("/")).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise PathTraversalError(
                f"Path escapes sandbox root: {path}", candidate=path
            )
        return candidate

    def read_binary(self, path: str) -> bytes:
        return self.resolve(path).read_bytes()

    def write_binary(self, path: str, data: bytes) -> None:
        with open(self.resolve(path), "wb") as f:
            f.write(data)

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def remove(self, path: str) -> None:
        self.resolve(path).unlink()

    def mkdir(self, path: str) -> None:
        os.mkdir(self.resolve(path))

    def stat(self, path: str) -> FileStat:
        return FileStat(size=self.resolve(path).stat().st_size)

    def is_dir(self, path: str) -> bool:
        return self.resolve(path).is_dir()
