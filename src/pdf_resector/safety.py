"""Safety checks run before anything is written to the sandbox."""

import logging
from typing import Optional

from .directory_provisioner import DirectoryProvisioner
from .errors import ConflictError, PathTraversalError, ResectorError, SafetyError
from .path_sanitizer import sanitize_filename, validate
from .schemas import ConflictCheck, ValidatedPath
from .storage import FileSystem

logger = logging.getLogger(__name__)

DEFAULT_MAX_PDF_SIZE = 100 * 1024 * 1024  # 100MB limit


class SafetyGate:
    """Validates output paths, provisions directories and gates overwrites."""

    def __init__(self, fs: FileSystem):
        """Initialize safety gate.

        Args:
            fs: Filesystem adapter rooted at the sandbox
        """
        self.fs = fs
        self.provisioner = DirectoryProvisioner(fs)

    def prepare(self, output_path: str) -> str:
        """Validate an output path and make it ready for writing.

        Validates the path (resolving it against the adapter root when the
        adapter has one), sanitizes the filename and creates any missing
        directories.

        Args:
            output_path: Untrusted sandbox-relative output path

        Returns:
            Final sandbox-relative path (``dir/filename`` or ``filename``)

        Raises:
            SafetyError: Wrapping the validation or provisioning failure
        """
        try:
            validated = validate(output_path, root=self.fs.root)
            final = ValidatedPath(
                directory=validated.directory,
                filename=sanitize_filename(validated.filename),
            )
            logger.debug("Original filename: %s", validated.filename)
            logger.debug("Sanitized filename: %s", final.filename)
            if not final.filename:
                raise PathTraversalError(
                    f"Invalid path {output_path!r}: filename is empty after sanitization",
                    candidate=output_path,
                    segment=validated.filename,
                )

            if final.directory:
                self.provisioner.ensure_exists(final.directory)
        except ResectorError as e:
            raise SafetyError("Unsafe output path", cause=e) from e

        return final.path

    def check_conflict(self, final_path: str) -> ConflictCheck:
        """Check whether writing to ``final_path`` would replace a file."""
        exists = self.fs.exists(final_path)
        return ConflictCheck(conflict=exists, requires_decision=exists)

    def resolve_conflict(self, final_path: str, overwrite: Optional[bool]) -> bool:
        """Apply the caller's overwrite decision to the conflict gate.

        Args:
            final_path: Prepared output path
            overwrite: True to replace an existing file; False or None to refuse

        Returns:
            True if a file will be overwritten, False if there was no conflict

        Raises:
            ConflictError: If a file exists and the caller did not opt in
        """
        if not self.check_conflict(final_path).conflict:
            return False
        if not overwrite:
            raise ConflictError(
                f"File {final_path} already exists; overwrite was not confirmed",
                path=final_path,
            )
        return True
