"""Application configuration using Pydantic settings."""
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings


def normalize_database_url(raw: str) -> str:
    """
    Convert the accepted DATABASE_URL formats into a SQLAlchemy URL.

    Supports ``postgres://`` URLs (Railway/Heroku style), plain SQLAlchemy
    URLs and keyword connection strings such as
    ``Host=db;Port=5432;Database=uxscore;Username=u;Password=p``.

    Args:
        raw: Value of the DATABASE_URL variable

    Returns:
        SQLAlchemy-compatible database URL
    """
    value = raw.strip()

    if value.startswith("postgres://"):
        return "postgresql://" + value[len("postgres://"):]

    if "://" in value:
        return value

    if "host=" in value.lower() or "server=" in value.lower():
        parts = {}
        for segment in value.split(";"):
            if "=" not in segment:
                continue
            key, _, val = segment.partition("=")
            parts[key.strip().lower()] = val.strip()

        host = parts.get("host") or parts.get("server") or "localhost"
        port = parts.get("port", "5432")
        database = parts.get("database", "")
        username = parts.get("username") or parts.get("user id") or ""
        password = parts.get("password", "")

        credentials = quote_plus(username)
        if password:
            credentials += ":" + quote_plus(password)
        return f"postgresql://{credentials}@{host}:{port}/{database}"

    raise ValueError("No valid database connection string found in DATABASE_URL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str
    auto_create_schema: bool = True

    # API Configuration
    api_host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "development"
    use_https_redirection: bool = False

    # Logging
    log_level: Optional[str] = None

    # Security
    jwt_secret_key: str
    jwt_issuer: str = "UXScore.API"
    jwt_audience: str = "UXScore.Client"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24
    jwt_clock_skew_seconds: int = 300
    bcrypt_rounds: int = 12

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:3001"

    # Uploads
    max_screenshot_bytes: int = 10 * 1024 * 1024

    @field_validator("database_url")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        return normalize_database_url(value)

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def effective_log_level(self) -> str:
        """LOG_LEVEL when set, otherwise DEBUG in development and INFO elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.is_development else "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
