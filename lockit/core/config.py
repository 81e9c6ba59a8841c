# lockit/core/config.py
"""
Application configuration using pydantic-settings.

Security considerations:
- SECRET_KEY signs the session cookie; it MUST be set in production
- OTP_WINDOW defaults to 6 steps (+/- 3 minutes at 30s), see OTP section below
- CORS_ORIGINS parsed from comma-separated env var, never defaults to "*"
"""
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lockit.db.adapters import DatabaseAdapter, get_database
from lockit.schemas.otp import VerificationWindow


class Settings(BaseSettings):
    """
    Strictly typed application settings.

    Priority for loading:
    1. Environment variables (highest priority)
    2. .env file (via pydantic-settings)
    3. Default values (lowest priority, dev-safe only)
    """

    # ─────────────────────────────────────────────────────────────
    # Application metadata
    # ─────────────────────────────────────────────────────────────
    PROJECT_NAME: str = "Lockit"
    PROJECT_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # ─────────────────────────────────────────────────────────────
    # Sessions
    # SECRET_KEY MUST be set in production via environment variable
    # ─────────────────────────────────────────────────────────────
    SECRET_KEY: str = "INSECURE_DEV_KEY_CHANGE_IN_PRODUCTION"
    SESSION_COOKIE: str = "lockit_session"

    # ─────────────────────────────────────────────────────────────
    # Route restriction
    # LOGIN_ROUTE: where anonymous browsers are redirected
    # REST: answer 401 instead of redirecting (JSON clients)
    # ─────────────────────────────────────────────────────────────
    LOGIN_ROUTE: str = "/login"
    REST: bool = False

    # ─────────────────────────────────────────────────────────────
    # One-time passwords
    #
    # OTP_WINDOW is the number of time steps accepted on each side of
    # the current one. 6 steps tolerates +/- 3 minutes of clock drift
    # but also keeps every code valid for ~6.5 minutes. Lower it to 1
    # when the authenticator clocks are trusted.
    # ─────────────────────────────────────────────────────────────
    OTP_ISSUER: str = "Lockit"
    OTP_WINDOW: int = 6
    OTP_TIME_STEP: int = 30
    OTP_DIGITS: int = 6
    QR_CHART_API: str = "https://chart.googleapis.com/chart?chs=200x200&cht=qr&chl="

    @field_validator("OTP_WINDOW")
    @classmethod
    def check_window(cls, v: int) -> int:
        if v < 0:
            raise ValueError("OTP_WINDOW must be >= 0")
        return v

    @field_validator("OTP_TIME_STEP")
    @classmethod
    def check_time_step(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("OTP_TIME_STEP must be > 0")
        return v

    @field_validator("OTP_DIGITS")
    @classmethod
    def check_digits(cls, v: int) -> int:
        if not 1 <= v <= 10:
            raise ValueError("OTP_DIGITS must be between 1 and 10")
        return v

    # ─────────────────────────────────────────────────────────────
    # Database
    # Only resolved to an adapter name, never connected to here.
    # ─────────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./lockit.db"

    # ─────────────────────────────────────────────────────────────
    # CORS Configuration
    # Empty string → empty list (NOT "*" for security)
    # ─────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "http://localhost:8000,http://127.0.0.1:8000"

    @property
    def BACKEND_CORS_ORIGINS(self) -> List[str]:
        """Parse CORS_ORIGINS into a list of allowed origins."""
        if not self.CORS_ORIGINS or not self.CORS_ORIGINS.strip():
            return []

        return [
            origin.strip()
            for origin in self.CORS_ORIGINS.split(",")
            if origin.strip()
        ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def verification_window(self) -> VerificationWindow:
        """Default drift window built from OTP_WINDOW / OTP_TIME_STEP."""
        return VerificationWindow(
            window_size=self.OTP_WINDOW,
            time_step=self.OTP_TIME_STEP,
        )

    @property
    def database(self) -> DatabaseAdapter:
        """Adapter descriptor for DATABASE_URL."""
        return get_database(self.DATABASE_URL)


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance.

    Settings are loaded once per process so every module sees the same
    configuration.
    """
    return Settings()


settings = get_settings()
