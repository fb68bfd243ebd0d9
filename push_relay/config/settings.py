"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the relay runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `site_verification_code` reads from `SITE_VERIFICATION_CODE`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        site_verification_code: Optional domain-verification token served on GET.
        relay_request_timeout_seconds: Timeout applied to the outbound relay request.
        relay_forward_body: Whether the inbound body is forwarded to the target.
        relay_raise_for_status: Whether non-2xx target responses are relayed as errors.
        log_level: Standard logging level name.
        log_json: Render log events as JSON when true, console format otherwise.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    site_verification_code: str | None = Field(default=None)
    relay_request_timeout_seconds: float = Field(default=120.0, gt=0)
    relay_forward_body: bool = Field(default=True)
    relay_raise_for_status: bool = Field(default=True)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    @field_validator("site_verification_code")
    @classmethod
    def _validate_optional_verification_code(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        if not stripped_value:
            return None
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized_value

    def settings_domain_verification_enabled(self) -> bool:
        """Return whether GET requests answer with the verification page.

        Returns:
            bool: True when a verification code is configured.
        """

        return self.site_verification_code is not None


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
