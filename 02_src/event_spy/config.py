"""Spy configuration loaded from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SpyConfig(BaseModel):
    """Runtime settings of the event spy."""

    disabled: bool = False
    log_level: str = "INFO"
    log_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


def load_config(env_file: str | Path | None = None) -> SpyConfig:
    """
    Build a SpyConfig from environment variables.

    Args:
        env_file: Optional .env file. Defaults to PROJECT_ROOT/.env.
                  Variables already set in the environment take precedence.

    Returns:
        Validated SpyConfig
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    values: dict = {}
    disabled = os.getenv("MAVEN_SPY_DISABLED")
    if disabled is not None:
        values["disabled"] = disabled
    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level
    log_file = os.getenv("LOG_FILE")
    if log_file:
        values["log_file"] = log_file

    return SpyConfig(**values)
