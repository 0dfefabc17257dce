"""Temp-then-final persistence of extracted documents."""

import logging
from typing import Any, Optional

from .codecs import DocumentCodec
from .errors import ResectorError, SerializationError, StorageIOError, VerificationError
from .schemas import PersistenceResult
from .storage import FileSystem

logger = logging.getLogger(__name__)


class DocumentPersister:
    """Writes a document to the sandbox without leaving half-written files.

    The bytes are first written to a sibling temp file, then written again in
    full to the final path. On failure the final path is put back the way it
    was before the call.
    """

    def __init__(self, fs: FileSystem, codec: DocumentCodec, temp_suffix: str = ".temp"):
        """Initialize persister.

        Args:
            fs: Filesystem adapter rooted at the sandbox
            codec: Codec used to serialize documents
            temp_suffix: Suffix appended to the final path for the temp copy
        """
        self.fs = fs
        self.codec = codec
        self.temp_suffix = temp_suffix

    def persist(self, doc: Any, final_path: str) -> PersistenceResult:
        """Serialize ``doc`` and write it to ``final_path``.

        Args:
            doc: Codec document handle
            final_path: Prepared sandbox-relative output path

        Returns:
            Result describing the written file

        Raises:
            SerializationError: If the document cannot be encoded
            StorageIOError: If a filesystem call fails
            ResectorError: Raised by the adapter itself (e.g. PathTraversalError),
                after the same rollback as a filesystem failure
            VerificationError: If the file is missing after a successful write
        """
        try:
            data = self.codec.serialize(doc)
        except Exception as e:
            raise SerializationError(f"Failed to serialize PDF: {e}") from e
        logger.debug("PDF bytes generated, size: %d", len(data))

        temp_path = f"{final_path}{self.temp_suffix}"
        previous: Optional[bytes] = None
        final_touched = False

        try:
            logger.debug("Writing temp file %s", temp_path)
            self.fs.write_binary(temp_path, data)

            if self.fs.exists(final_path):
                previous = self.fs.read_binary(final_path)
                logger.debug("Removing existing file at %s", final_path)
                final_touched = True
                self.fs.remove(final_path)

            logger.debug("Writing final file %s", final_path)
            final_touched = True
            self.fs.write_binary(final_path, data)
        except (OSError, ResectorError) as e:
            logger.error("Failed to save PDF to %s: %s", final_path, e)
            if final_touched:
                self._restore(final_path, previous)
            self._cleanup_temp(temp_path)
            if isinstance(e, ResectorError):
                raise
            raise StorageIOError(f"Failed to save PDF: {e}") from e

        self._cleanup_temp(temp_path)

        try:
            saved = self.fs.exists(final_path)
        except OSError as e:
            raise VerificationError(f"Failed to verify saved PDF: {e}") from e
        if not saved:
            raise VerificationError(
                f"Failed to verify saved PDF: {final_path} was not saved successfully"
            )

        return PersistenceResult(
            path=final_path,
            size=len(data),
            page_count=self.codec.page_count(doc),
            overwritten=previous is not None,
        )

    def _cleanup_temp(self, temp_path: str) -> None:
        try:
            if self.fs.exists(temp_path):
                self.fs.remove(temp_path)
        except (OSError, ResectorError) as e:
            logger.warning("Failed to clean up temporary file %s: %s", temp_path, e)

    def _restore(self, final_path: str, previous: Optional[bytes]) -> None:
        """Put ``final_path`` back into its pre-operation state.

        If the previous content cannot be written back in full, the path is
        left absent rather than truncated.
        """
        try:
            if self.fs.exists(final_path):
                self.fs.remove(final_path)
        except (OSError, ResectorError) as e:
            logger.warning("Failed to remove partial file %s after error: %s", final_path, e)
            return

        if previous is None:
            return

        try:
            logger.debug("Restoring previous content of %s", final_path)
            self.fs.write_binary(final_path, previous)
        except (OSError, ResectorError) as e:
            logger.warning("Failed to restore %s after error: %s", final_path, e)
            try:
                if self.fs.exists(final_path):
                    self.fs.remove(final_path)
            except (OSError, ResectorError) as cleanup_error:
                logger.warning(
                    "Failed to remove partially restored %s: %s", final_path, cleanup_error
                )
