# backend/app/core/config.py
"""
Application configuration using pydantic-settings.

Security considerations:
- No hardcoded secrets in production (SECRET_KEY must be set via env)
- CORS_ORIGINS parsed from comma-separated env var, never defaults to "*"
- Database URLs normalized for async drivers automatically
"""
from functools import lru_cache
from typing import Dict, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


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
    PROJECT_NAME: str = "Ttrade Capital"
    PROJECT_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    SUPPORT_EMAIL: str = "support@ttradecapital.com"

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # ─────────────────────────────────────────────────────────────
    # Access token issued at sign-in (sb-access-token cookie)
    # ─────────────────────────────────────────────────────────────
    SECRET_KEY: str = "INSECURE_DEV_KEY_CHANGE_IN_PRODUCTION"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 365

    # ─────────────────────────────────────────────────────────────
    # Session cookies
    # The user_id cookie is the only thing privileged routes look at.
    # ─────────────────────────────────────────────────────────────
    SESSION_COOKIE_NAME: str = "user_id"
    ACCESS_COOKIE_NAME: str = "sb-access-token"
    REFRESH_COOKIE_NAME: str = "sb-refresh-token"
    COOKIE_MAX_AGE: int = 31536000

    # ─────────────────────────────────────────────────────────────
    # Account rules
    # ─────────────────────────────────────────────────────────────
    SIGNUP_BONUS: float = 10
    MIN_SIGNUP_PASSWORD_LENGTH: int = 8
    MIN_CHANGED_PASSWORD_LENGTH: int = 6
    MIN_DEPOSIT_AMOUNT: float = 300
    MIN_WITHDRAWAL_AMOUNT: float = 300

    # Platform receiving addresses shown to users on deposit, keyed by symbol
    DEPOSIT_WALLETS: Dict[str, str] = {
        "USDC": "0x...",
        "USDT": "0x...",
        "DOT": "0x...",
        "XRP": "r...",
        "ETH": "0x...",
        "AVAX": "X-...",
        "ADA": "addr...",
        "SOL": "...",
        "BTC": "bc1...",
        "BNB": "bnb...",
    }

    ADMIN_EMAIL: str = "ttradecapitalstatus@gmail.com"

    # Comma-separated profile ids allowed on /admin routes.
    # Empty means any caller holding a session cookie.
    ADMIN_USER_IDS: str = ""

    # ─────────────────────────────────────────────────────────────
    # Database Configuration
    # Priority: DATABASE_URL env var → SQLite fallback for local dev
    # ─────────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./ttrade.db"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """
        Normalize database URLs for async SQLAlchemy compatibility.

        Conversions:
        - postgres://     → postgresql+asyncpg://
        - postgresql://   → postgresql+asyncpg://
        - sqlite:///      → sqlite+aiosqlite:///
        """
        if v is None:
            return "sqlite+aiosqlite:///./ttrade.db"

        url = v.strip()

        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)

        if url.startswith("postgresql://") and "+asyncpg" not in url:
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)

        if url.startswith("sqlite:///") and "+aiosqlite" not in url:
            return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)

        return url

    # MUST be False in production to prevent SQL query exposure
    DATABASE_ECHO: bool = False

    # ─────────────────────────────────────────────────────────────
    # CORS Configuration
    # Empty string → empty list (NOT "*")
    # ─────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000,http://127.0.0.1:8000"

    @property
    def BACKEND_CORS_ORIGINS(self) -> List[str]:
        """Parse CORS_ORIGINS into a list of allowed origins."""
        return _split_csv(self.CORS_ORIGINS)

    @property
    def ADMIN_IDS(self) -> List[str]:
        return _split_csv(self.ADMIN_USER_IDS)

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


def _split_csv(value: str) -> List[str]:
    if not value or not value.strip():
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance.

    Settings are only loaded once, giving consistent configuration
    across the application.
    """
    return Settings()


settings = get_settings()
