# Standard library imports
import os
from typing import Final, List, Optional


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Application
        self.app_name: Final[str] = os.getenv("APP_NAME", "User Registration Service")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
            ).split(",")
            if origin.strip()
        ]
        
        # Persistence backend: "mongo" or "memory"
        self.user_repository_backend: Final[str] = os.getenv(
            "USER_REPOSITORY_BACKEND", "mongo"
        ).strip().lower()
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_registration")
        
        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))
        
        # SMTP Configuration (welcome email)
        self.smtp_host: Final[Optional[str]] = os.getenv("SMTP_HOST") or None
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_user: Final[Optional[str]] = os.getenv("SMTP_USER") or None
        self.smtp_password: Final[Optional[str]] = os.getenv("SMTP_PASSWORD") or None
        self.smtp_use_tls: Final[bool] = _get_bool("SMTP_USE_TLS", "false")
        self.smtp_start_tls: Final[bool] = _get_bool("SMTP_START_TLS", "true")
        self.email_from: Final[str] = os.getenv("EMAIL_FROM", "no-reply@example.com")
        self.email_from_name: Final[str] = os.getenv("EMAIL_FROM_NAME", "User Registration Service")
        
        # Timeouts around I/O-bound use case steps
        self.persistence_timeout_seconds: Final[float] = float(
            os.getenv("PERSISTENCE_TIMEOUT_SECONDS", "10")
        )
        self.notification_timeout_seconds: Final[float] = float(
            os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "15")
        )
    
    @property
    def smtp_configured(self) -> bool:
        """True when host and credentials are all present."""
        return bool(self.smtp_host and self.smtp_user and self.smtp_password)


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
