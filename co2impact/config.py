"""Application configuration with validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dashboard settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "CO₂ Impact Dashboard"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Remote computation service
    COMPUTE_API_URL: str = "http://localhost:8000"
    COMPUTE_FN_PATH: str = "/api/v1/fn"
    COMPUTE_API_KEY: Optional[SecretStr] = None
    COMPUTE_TIMEOUT_SECONDS: Optional[float] = Field(
        default=60.0,
        gt=0,
        description="Per-call timeout; None waits indefinitely",
    )

    # View
    HOME_URL: Optional[str] = None

    @field_validator("COMPUTE_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"COMPUTE_API_URL must be an http(s) URL, got {v!r}")
        return v

    @field_validator("COMPUTE_FN_PATH")
    @classmethod
    def normalize_fn_path(cls, v: str) -> str:
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production talks to the compute service over TLS."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if not self.COMPUTE_API_URL.startswith("https://"):
                raise ValueError("COMPUTE_API_URL must use https in production")
        return self

    @property
    def compute_fn_base(self) -> str:
        """Base URL that operation names are appended to."""
        return f"{self.COMPUTE_API_URL}{self.COMPUTE_FN_PATH}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
