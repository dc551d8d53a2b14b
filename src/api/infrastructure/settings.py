"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly,
in particular the token signing secret.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Token issuance and password hashing settings.

    Environment variables:
        SCREECHR_AUTH_SECRET_KEY: HMAC secret used to sign tokens (min 32 chars)
        SCREECHR_AUTH_ISSUER: Value of the ``iss`` claim (default: screechr)
        SCREECHR_AUTH_AUDIENCE: Value of the ``aud`` claim (default: screechr-api)
        SCREECHR_AUTH_ALGORITHM: HMAC signing algorithm, one of HS256, HS384
            or HS512 (default: HS256)
        SCREECHR_AUTH_TOKEN_LIFETIME_MINUTES: Token lifetime (default: 60)
        SCREECHR_AUTH_BCRYPT_ROUNDS: bcrypt work factor (default: 12)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCREECHR_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret_key: SecretStr = Field(
        default=SecretStr("screechr-development-secret-change-me!"),
        description="HMAC secret used to sign bearer tokens",
    )
    issuer: str = Field(default="screechr", description="Token issuer claim")
    audience: str = Field(default="screechr-api", description="Token audience claim")
    algorithm: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        description="HMAC JWT signing algorithm used with secret_key",
    )
    token_lifetime_minutes: int = Field(
        default=60,
        description="Lifetime of issued tokens in minutes",
        ge=1,
        le=24 * 60,
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt work factor used when hashing passwords",
        ge=4,
        le=16,
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_length(cls, value: SecretStr) -> SecretStr:
        """Reject secrets too short for HMAC-SHA256."""
        if len(value.get_secret_value()) < 32:
            raise ValueError("secret_key must be at least 32 characters long")
        return value


class Settings(BaseSettings):
    """Main application settings.

    Environment variables:
        SCREECHR_APP_NAME: Application name shown in the OpenAPI docs
        SCREECHR_DEBUG: Debug mode (default: false)
        SCREECHR_SEED_DEMO_DATA: Seed the demo profiles and screeches at
            startup (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCREECHR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Screechr API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    seed_demo_data: bool = Field(
        default=True,
        description="Populate the in-memory repository with demo data at startup",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_auth_settings() -> AuthSettings:
    """Get cached auth settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return AuthSettings()
