"""
Configuration settings for Report Views.
Controls report defaults, URL building, and server behavior.
"""

from typing import Dict, Any


class Settings:
    """Central configuration for the report views."""

    # Report defaults
    API_DATATABLE_DEFAULT_LIMIT: int = 100
    BASE_REPORT_URL: str = "index.php"
    DATATABLE_JS_TYPE: str = "DataTable"

    # Default site used when a request does not name one
    DEFAULT_ID_SITE: int = 1

    # Translations
    DEFAULT_LANGUAGE: str = "en"

    # Password hashing cost
    BCRYPT_ROUNDS: int = 12

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG_MODE: bool = False

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            key: value for key, value in cls.__dict__.items()
            if not key.startswith('_') and not callable(value)
            and not isinstance(value, classmethod)
        }

    @classmethod
    def update(cls, **kwargs):
        """Update settings dynamically."""
        for key, value in kwargs.items():
            if hasattr(cls, key.upper()):
                setattr(cls, key.upper(), value)
