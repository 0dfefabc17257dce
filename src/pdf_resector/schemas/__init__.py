"""Pydantic schemas for resector data."""

from .documents import (
    ConflictCheck,
    PersistenceResult,
    ProcessingProgress,
    ValidatedPath,
)

__all__ = [
    "ConflictCheck",
    "PersistenceResult",
    "ProcessingProgress",
    "ValidatedPath",
]
