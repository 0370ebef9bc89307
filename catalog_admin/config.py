# catalog_admin/config.py
"""
Configuration for the Catalog Admin client.

Values are read from the environment once at import time. The console
entry point loads a .env file before importing this module.
"""

import os
import logging
from urllib.parse import urlparse

logger = logging.getLogger("catalog_admin.config")


class AppSettings:
    """Configuration settings for the admin client."""
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:5000/api")
    REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "30"))
    PAGE_SIZE = int(os.environ.get("PAGE_SIZE", "5"))
    TOAST_DURATION_MS = int(os.environ.get("TOAST_DURATION_MS", "3000"))
    DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "en")

    # Token storage: in memory unless a session file is configured
    SESSION_FILE = os.environ.get("SESSION_FILE")
    PREFERENCES_FILE = os.environ.get(
        "PREFERENCES_FILE",
        os.path.join(os.path.expanduser("~/.catalog_admin"), "preferences.json")
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")

    @classmethod
    def validate_settings(cls) -> bool:
        """
        Validate that required settings are usable.

        Returns:
            bool: True if all settings are valid
        """
        parsed = urlparse(cls.API_BASE_URL or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            logger.error(f"API_BASE_URL is not a valid http(s) URL: {cls.API_BASE_URL!r}")
            return False

        if cls.PAGE_SIZE < 1:
            logger.error(f"PAGE_SIZE must be positive, got {cls.PAGE_SIZE}")
            return False

        if cls.TOAST_DURATION_MS < 0:
            logger.error(f"TOAST_DURATION_MS must not be negative, got {cls.TOAST_DURATION_MS}")
            return False

        return True
