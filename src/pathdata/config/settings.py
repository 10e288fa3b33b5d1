"""Configuration settings for Pathdata."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class NonFinitePolicy(str, Enum):
    """What to do with NaN and infinite coordinates."""

    PASS_THROUGH = "pass_through"
    REJECT = "reject"


class EncoderConfig(BaseModel):
    """Configuration for number formatting in path data.

    The defaults reproduce plain shortest decimal output: no rounding and
    non-finite values written as ``NaN``/``Infinity``.
    """

    precision: int | None = Field(
        default=None,
        ge=0,
        le=15,
        description="Round numbers to this many decimal places (None = no rounding)",
    )
    non_finite: NonFinitePolicy = Field(
        default=NonFinitePolicy.PASS_THROUGH,
        description="Handling of NaN and infinite numbers",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathDataSettings(BaseModel):
    """Main application settings."""

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathDataSettings:
    """Get default application settings."""
    return PathDataSettings()
