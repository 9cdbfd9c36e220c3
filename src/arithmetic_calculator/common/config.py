"""Runtime settings for the calculator, loaded from CALC_* environment variables."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalculatorSettings(BaseSettings):
    """
    Calculator settings.

    Every field can be overridden from the environment, e.g. ``CALC_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name")
    log_file: Optional[Path] = Field(default=None, description="Optional file receiving log records")
    error_text: str = Field(default="Error", min_length=1, description="Display text shown after a failed evaluation")
