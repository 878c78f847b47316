"""Typed configuration sections."""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """``logging`` section."""

    model_config = ConfigDict(extra="forbid")

    level: str = "WARNING"
    file: Optional[Path] = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {LOG_LEVELS}")
        return value


class ResolutionSettings(BaseModel):
    """``resolution`` section."""

    model_config = ConfigDict(extra="forbid")

    # Exact-name hits must derive from a class clue
    strict_names: bool = False


class WiringSettings(BaseModel):
    """``wiring`` section."""

    model_config = ConfigDict(extra="forbid")

    modules: List[str] = Field(default_factory=list)

    @field_validator("modules", mode="before")
    @classmethod
    def _split_string(cls, value):
        # Environment overrides arrive as one comma-separated string
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


class Settings(BaseModel):
    """Complete smartdi configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    resolution: ResolutionSettings = Field(default_factory=ResolutionSettings)
    wiring: WiringSettings = Field(default_factory=WiringSettings)
