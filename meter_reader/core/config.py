# Standard library imports
import os
from typing import Final, List, Optional


class ConfigurationError(ValueError):
    """Raised when required settings are missing or invalid."""

    def __init__(self, missing: List[str], invalid: Optional[List[str]] = None) -> None:
        self.missing = missing
        self.invalid = invalid or []
        problems = []
        if self.missing:
            problems.append(f"Missing required configuration: {', '.join(self.missing)}")
        if self.invalid:
            problems.append(f"Invalid configuration: {', '.join(self.invalid)}")
        super().__init__("; ".join(problems))


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    Every setting has a named field; required ones are checked by validate()
    once at startup.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "meter_readings")

        # Gemini (OCR) Configuration
        self.gemini_api_key: Final[str] = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", "")
        self.gemini_model: Final[str] = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

        # Image storage
        self.image_storage_dir: Final[str] = os.getenv("IMAGE_STORAGE_DIR", "data/images")
        self.public_base_url: Final[str] = os.getenv("PUBLIC_BASE_URL", "").rstrip("/")

        # Misc
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]

    def validate(self) -> None:
        """
        Check that every required setting has a value and that
        LOCAL_TIMEZONE names a known timezone.

        Raises:
            ConfigurationError: listing the environment variables that are missing or invalid
        """
        from ..utils.datetime_utils import resolve_timezone

        required = {
            "MONGO_URI": self.mongo_uri,
            "MONGO_DB_NAME": self.mongo_database_name,
            "GEMINI_API_KEY": self.gemini_api_key,
            "GEMINI_MODEL": self.gemini_model,
            "IMAGE_STORAGE_DIR": self.image_storage_dir,
        }
        missing = [name for name, value in required.items() if not value or not value.strip()]
        invalid = []
        try:
            resolve_timezone(self.local_timezone)
        except ValueError:
            invalid.append("LOCAL_TIMEZONE")
        if missing or invalid:
            raise ConfigurationError(missing, invalid)


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
