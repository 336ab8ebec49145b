"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

Settings are read once at process start and are immutable afterwards: the reception helpline is
substituted into every reply, and the spreadsheet identity decides where every lookup goes.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HELPLINE = "+91-XXXXXXXXXX"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    reception_helpline: str = Field(default=DEFAULT_HELPLINE, alias="RECEPTION_HELPLINE")

    google_sheet_id: str = Field(alias="GOOGLE_SHEET_ID", min_length=1)
    google_service_account_json: str | None = Field(
        default=None, alias="GOOGLE_SERVICE_ACCOUNT_JSON"
    )
    google_service_account_file: str | None = Field(
        default=None, alias="GOOGLE_SERVICE_ACCOUNT_FILE"
    )
    sheets_timeout_s: float = Field(default=10.0, gt=0, alias="SHEETS_TIMEOUT_S")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")

    @field_validator("reception_helpline")
    @classmethod
    def validate_helpline(cls, value: str) -> str:
        """Reject an empty helpline; every apology template refers the user to it."""

        value = value.strip()
        if not value:
            raise ValueError("RECEPTION_HELPLINE must not be empty")
        return value

    @field_validator("google_service_account_json")
    @classmethod
    def validate_service_account_json(cls, value: str | None) -> str | None:
        """Validate that inline service-account credentials decode to a JSON object."""

        if value is None or not value.strip():
            return None
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError("GOOGLE_SERVICE_ACCOUNT_JSON is not valid JSON") from exc
        if not isinstance(decoded, dict):
            raise ValueError("GOOGLE_SERVICE_ACCOUNT_JSON must be a JSON object")
        return value

    @model_validator(mode="after")
    def validate_credentials_source(self) -> Settings:
        """Validate that the spreadsheet can be authorized one way or another."""

        if not self.google_service_account_json and not self.google_service_account_file:
            raise ValueError(
                "GOOGLE_SERVICE_ACCOUNT_JSON or GOOGLE_SERVICE_ACCOUNT_FILE is required"
            )
        return self

    def service_account_info(self) -> dict[str, Any] | None:
        """Return the decoded inline service-account credentials, if configured."""

        if not self.google_service_account_json:
            return None
        return json.loads(self.google_service_account_json)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
