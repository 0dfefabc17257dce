"""Validation and sanitization of sandbox-relative output paths."""

import re
from pathlib import Path
from typing import Optional

from .errors import PathTraversalError
from .schemas import ValidatedPath

# Characters that are unsafe in filenames on common filesystems
INVALID_FILENAME_CHARS = re.compile(r'[<>:"|?*\\]')
WHITESPACE_RUN = re.compile(r"\s+")
DASH_RUN = re.compile(r"-+")

TRAVERSAL_MARKERS = ("../", "..\\")


def contains_traversal(candidate: str) -> bool:
    """Textual check for parent-directory sequences.

    Deliberately conservative: names that merely contain ``../`` are rejected too.
    """
    return any(marker in candidate for marker in TRAVERSAL_MARKERS)


def validate(candidate: str, root: Optional[Path] = None) -> ValidatedPath:
    """Validate a candidate path and split it into directory and filename.

    Args:
        candidate: Untrusted sandbox-relative path
        root: Sandbox root; when given, the resolved path must also lie beneath it

    Returns:
        The validated path

    Raises:
        PathTraversalError: If the path contains traversal sequences or an
            illegal segment
    """
    if contains_traversal(candidate):
        raise PathTraversalError(
            f"Invalid path: attempting to access location outside sandbox: {candidate!r}",
            candidate=candidate,
        )

    segments = candidate.strip("/").split("/")
    for segment in segments:
        if segment in ("", ".", ".."):
            reason = "empty segment" if not segment else f"segment {segment!r}"
            raise PathTraversalError(
                f"Invalid path {candidate!r}: {reason} not allowed",
                candidate=candidate,
                segment=segment,
            )
        if "\\" in segment or ":" in segment:
            raise PathTraversalError(
                f"Invalid path {candidate!r}: segment {segment!r} contains a "
                "backslash or colon",
                candidate=candidate,
                segment=segment,
            )

    if root is not None:
        base = Path(root).resolve()
        resolved = base.joinpath(*segments).resolve()
        if base not in resolved.parents:
            raise PathTraversalError(
                f"Path escapes sandbox root: {candidate!r}", candidate=candidate
            )

    return ValidatedPath(directory=tuple(segments[:-1]), filename=segments[-1])


def normalize_source_path(path: str) -> str:
    """Guard a source path read from the sandbox.

    Only the textual traversal check applies. Existing files may carry names
    the output rules would refuse (such as ``Meeting 10:30.pdf``), and the
    filesystem adapter enforces containment when the path is resolved.

    Raises:
        PathTraversalError: If the path contains a traversal sequence
    """
    if contains_traversal(path):
        raise PathTraversalError(
            f"Invalid path: attempting to access location outside sandbox: {path!r}",
            candidate=path,
        )
    return path.strip("/")


def _sanitize_string(value: str) -> str:
    value = INVALID_FILENAME_CHARS.sub("-", value)
    value = WHITESPACE_RUN.sub(" ", value)
    value = DASH_RUN.sub("-", value)
    return value.strip()


def sanitize_filename(name: str) -> str:
    """Replace filesystem-unsafe characters while keeping the extension.

    The extension is everything from the last dot on and is returned
    untouched. Without a dot the whole name is sanitized.

    Args:
        name: Filename (no directory part)

    Returns:
        Sanitized filename
    """
    dot = name.rfind(".")
    if dot == -1:
        return _sanitize_string(name)

    base, extension = name[:dot], name[dot:]
    return f"{_sanitize_string(base)}{extension}"
