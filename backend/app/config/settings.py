from pydantic_settings import BaseSettings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    database_url: str = "sqlite:///./studio.db"
    # Auth settings
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24 * 7
    bcrypt_rounds: int = 12
    auth_cookie_name: str = "token"
    auth_cookie_secure: bool = False
    # Account and project defaults
    default_tokens_limit: int = 50000
    public_projects_limit: int = 20
    # Logging
    log_level: str = "INFO"
    debug: bool = False
    # CORS
    cors_origins: list = ["http://localhost:3000"]
    # Telemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"

    class Config:
        env_file = ".env"
        case_sensitive = False


def validate_settings(settings: Settings) -> None:
    """Validate required settings"""
    errors = []

    # Security
    if not settings.jwt_secret_key:
        errors.append("JWT_SECRET_KEY is required")

    if settings.jwt_expiration_hours <= 0:
        errors.append("JWT_EXPIRATION_HOURS must be positive")

    if not 4 <= settings.bcrypt_rounds <= 31:
        errors.append("BCRYPT_ROUNDS must be between 4 and 31")

    if errors:
        error_message = "Configuration errors:\n" + "\n".join(f"  - {error}" for error in errors)
        raise ValueError(error_message)


settings = Settings()
validate_settings(settings)
logger.info("Settings loaded and validated successfully")
