# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- Document lifecycle --
    STRICT_DOCUMENT_TRANSITIONS: bool = Field(
        default=True,
        description=(
            "Reject document status changes that leave a terminal status "
            "(APPROVED/REJECTED). Set False to allow any status to any status."
        ),
    )
    ENFORCE_SINGLE_ACTIVE_DOCUMENT: bool = Field(
        default=False,
        description="Allow at most one non-rejected document per type per application.",
    )

    # -- Completeness --
    DOCUMENT_REQUIREMENTS_FILE: Path | None = Field(
        default=None,
        description="YAML table of required document types per loan type. "
        "Defaults to the table bundled with the package.",
    )


settings = Settings()
