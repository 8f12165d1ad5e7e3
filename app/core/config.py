"""Localization catalog configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

SUPPORTED_FILE_FORMATS = ("yaml", "json")


class I18nSettings(BaseSettings):
    """Translation catalog settings.

    Environment Variables:
        I18N_LANG_PATH: Base directory holding one sub-directory per locale
        I18N_DEFAULT_LOCALE: Locale used when the host provides none
        I18N_LOCALE: Host locale, read by the settings locale provider
        I18N_FILE_FORMAT: Message file format, 'yaml' or 'json'
    """

    LANG_PATH: str = Field(default="lang", alias="I18N_LANG_PATH")
    DEFAULT_LOCALE: str = Field(default="en_EN", alias="I18N_DEFAULT_LOCALE")
    LOCALE: Optional[str] = Field(default=None, alias="I18N_LOCALE")
    FILE_FORMAT: str = Field(default="yaml", alias="I18N_FILE_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("FILE_FORMAT", mode="before")
    @classmethod
    def _normalize_file_format(cls, v: Optional[str]) -> str:
        """Accept the format in any case, reject unknown formats."""
        if v is None:
            return "yaml"
        value = str(v).strip().lower()
        if value == "yml":
            value = "yaml"
        if value not in SUPPORTED_FILE_FORMATS:
            raise ValueError(
                f"Unsupported message file format: {v}. "
                f"Expected one of {', '.join(SUPPORTED_FILE_FORMATS)}"
            )
        return value

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def _require_default_locale(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return v.strip()


class Settings(BaseSettings):
    """Localization catalog configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Translation settings
    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)


settings = Settings()


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Returns:
        Settings: The module-level settings loaded from the environment.
    """
    return settings
