"""Client configuration using Pydantic Settings."""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """OpenSearchServer client settings loaded from environment variables.

    Every variable is read with the ``OSS_`` prefix, e.g. ``OSS_ENGINE_URL``
    or ``OSS_API_KEY``. Invalid values fail fast with a ValidationError.
    """

    # Engine Settings
    engine_url: str = Field(
        default="http://localhost:9090",
        description="Base URL of the OpenSearchServer engine",
    )
    index: str | None = Field(default=None, description="Default index name")
    login: str | None = Field(default=None, description="API login")
    api_key: SecretStr | None = Field(default=None, description="API key")
    template: str | None = Field(
        default=None,
        description="Query template applied to every search",
    )

    # Transport Settings
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP request timeout in seconds",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Maximum attempts for a request on transport failures",
    )

    # Logging Settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_prefix="OSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("engine_url")
    @classmethod
    def validate_engine_url(cls, v: str) -> str:
        """Ensure the engine URL is an http(s) URL without trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"engine_url must start with http:// or https://, got '{v}'"
            )
        return v.rstrip("/")

    @field_validator("index", "login", "template")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and v.strip() == "":
            return None
        return v

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: SecretStr | None) -> SecretStr | None:
        """Treat an empty API key as not configured."""
        if v is None or v.get_secret_value().strip() == "":
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"log_level must be one of {valid_levels}, got '{v}'"
            )
        return v_upper


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings: The client settings

    Raises:
        ValidationError: If settings validation fails
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment.

    Returns:
        Settings: The reloaded client settings
    """
    global _settings
    _settings = Settings()
    return _settings
