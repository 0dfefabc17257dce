"""Configuration settings for the PDF resector."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PDF_RESECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sandbox settings
    sandbox_root: Path = Path(".")  # All reads and writes stay beneath this directory

    # Output settings
    default_output_folder: str = "split-pdfs"  # Blank means "next to the source PDF"
    temp_suffix: str = ".temp"

    # Processing settings
    max_pdf_size: int = 100 * 1024 * 1024  # 100MB limit

    # Logging
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
