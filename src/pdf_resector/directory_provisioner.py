"""Creation of the directory chain for an output path."""

import logging
from typing import Sequence, Union

from .errors import StorageIOError
from .storage import FileSystem

logger = logging.getLogger(__name__)


class DirectoryProvisioner:
    """Ensures every directory segment of a path exists."""

    def __init__(self, fs: FileSystem):
        self.fs = fs

    def ensure_exists(self, directory: Union[Sequence[str], str]) -> None:
        """Create each missing directory prefix, left to right.

        Idempotent. A directory created concurrently between the existence
        check and the create call counts as success.

        Args:
            directory: Segment sequence, or a '/'-joined string

        Raises:
            StorageIOError: If a directory cannot be created
        """
        if isinstance(directory, str):
            directory = directory.split("/")
        parts = [part for part in directory if part]

        current = ""
        for part in parts:
            current = f"{current}/{part}" if current else part
            try:
                if self.fs.exists(current):
                    if not self.fs.is_dir(current):
                        raise StorageIOError(
                            f"Failed to create directory: {current} exists and is not a directory"
                        )
                    continue
                logger.debug("Creating directory %s", current)
                self.fs.mkdir(current)
            except FileExistsError:
                logger.debug("Directory %s appeared concurrently", current)
            except OSError as e:
                raise StorageIOError(f"Failed to create directory {current}: {e}") from e
