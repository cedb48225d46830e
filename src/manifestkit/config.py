"""Runtime settings for manifestkit, read from MANIFESTKIT_* environment variables."""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "MANIFESTKIT_"


class Settings(BaseModel):
    """Settings shared by the file loaders and manifest consumers."""

    debug: bool = Field(False, description="Enable DEBUG level logging")
    strict: bool = Field(False, description="Raise on malformed YAML instead of skipping lines")
    indent_unit: int = Field(2, ge=1, description="Spaces per indentation level")
    max_document_bytes: int | None = Field(
        None, ge=1, description="Reject files larger than this many bytes (None = no limit)"
    )
    log_file: str | None = Field(None, description="Optional path to a log file")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Validated Settings

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls.model_validate(values)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
