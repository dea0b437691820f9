# policy_picker/config/settings.py
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions.config import ConfigError
from ..protocol.objects import AskForApproval

logger = logging.getLogger("Settings")

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    # === Environment Variables (POLICY_PICKER_ prefix) ===
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    approval_policy: AskForApproval = AskForApproval.UNLESS_TRUSTED

    # === Pydantic V2 Configuration ===
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POLICY_PICKER_",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return level

    @field_validator("approval_policy", mode="before")
    @classmethod
    def parse_approval_policy(cls, value) -> AskForApproval:
        return AskForApproval.parse(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once; invalid values surface as ConfigError."""
    try:
        settings = Settings()
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e.error_count()} error(s)",
            original_error=e,
        ) from e
    logger.debug(
        "Loaded settings: log_level=%s approval_policy=%s",
        settings.log_level,
        settings.approval_policy,
    )
    return settings
