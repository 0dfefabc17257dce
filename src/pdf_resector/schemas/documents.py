"""Pydantic models passed between the resector components."""

from pydantic import BaseModel, ConfigDict, Field


class ValidatedPath(BaseModel):
    """A sandbox-relative path that passed traversal and format checks."""

    model_config = ConfigDict(frozen=True)

    directory: tuple[str, ...] = Field(
        default=(),
        description="Ordered directory segments below the sandbox root"
    )
    filename: str = Field(description="Final path segment")

    @property
    def directory_path(self) -> str:
        """Directory segments joined with '/' (empty for the sandbox root)."""
        return "/".join(self.directory)

    @property
    def path(self) -> str:
        """Full sandbox-relative path."""
        if self.directory:
            return f"{self.directory_path}/{self.filename}"
        return self.filename


class ProcessingProgress(BaseModel):
    """Progress update emitted while loading, extracting or saving."""

    current: int = Field(description="Units of work completed")
    total: int = Field(description="Total units of work")
    status: str = Field(description="Human-readable status line")


class ConflictCheck(BaseModel):
    """Whether an output path collides with an existing file."""

    conflict: bool = Field(description="A file already exists at the path")
    requires_decision: bool = Field(
        description="Caller must resolve overwrite/cancel before persisting"
    )


class PersistenceResult(BaseModel):
    """Result of a successful split-and-persist operation."""

    path: str = Field(description="Final sandbox-relative path of the written PDF")
    size: int = Field(description="Number of bytes written")
    page_count: int | None = Field(default=None, description="Pages in the written document")
    overwritten: bool = Field(default=False, description="Whether a previous file was replaced")
