"""Settings for smartcriteria."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CriteriaSettings(BaseSettings):
    """smartcriteria configuration settings."""

    LOG_LEVEL: str = "INFO"

    # "raise": a stored "<count> <unit>" date value with a non-numeric count aborts the build
    # "fallback": report it as a diagnostic and compile the value as a plain comparison
    CRITERIA_MALFORMED_DATE_POLICY: Literal["raise", "fallback"] = "raise"

    # Forward compiler diagnostics to the package logger
    CRITERIA_LOG_DIAGNOSTICS: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = CriteriaSettings()
