"""Configuration management."""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Environment defaults for the Leaderbird client."""

    # API credentials
    PUBLIC_KEY: str = os.getenv("LEADERBIRD_PUBLIC_KEY", "")
    PRIVATE_KEY: str = os.getenv("LEADERBIRD_PRIVATE_KEY", "")

    # REST API URL
    DEFAULT_BASE_URL = "https://api.leaderbird.co"
    BASE_URL: str = os.getenv("LEADERBIRD_BASE_URL", DEFAULT_BASE_URL)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Connection settings
    REST_TIMEOUT: float = float(os.getenv("LEADERBIRD_TIMEOUT", "10"))  # seconds

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration."""
        if not cls.PUBLIC_KEY or not cls.PRIVATE_KEY:
            return False
        return True
