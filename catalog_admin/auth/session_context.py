# catalog_admin/auth/session_context.py
"""
Session token storage and the session context shared by the client.

The session context is created once by the application and passed to the
request gateway, the services and the login flow. Login begins the session,
logout or an authorization failure ends it.
"""

import logging
import datetime
from typing import Dict, Any, Optional

logger = logging.getLogger("catalog_admin.session")

TOKEN_KEY = "accessToken"


class TokenStore:
    """Holds the opaque access token for the current session."""

    def __init__(self, storage):
        """
        Initialize the token store.

        Args:
            storage: Key/value storage backend (see catalog_admin.storage)
        """
        self.storage = storage

    def set_token(self, token: str) -> None:
        self.storage.set_item(TOKEN_KEY, token)

    def get_token(self) -> Optional[str]:
        return self.storage.get_item(TOKEN_KEY) or None

    def remove_token(self) -> None:
        self.storage.remove_item(TOKEN_KEY)


class SessionContext:
    """
    Session state handed to every component that talks to the backend.

    The token store is only written through begin() and end().
    """

    def __init__(self, token_store: TokenStore, locale=None):
        """
        Initialize the session context.

        Args:
            token_store (TokenStore): Store for the access token
            locale: Optional LocalePreference for the session
        """
        self.token_store = token_store
        self.locale = locale
        self.auth_timestamp: Optional[datetime.datetime] = None

    def begin(self, token: str) -> None:
        """Start an authenticated session with the given token."""
        if not token:
            raise ValueError("Cannot begin a session without a token")
        self.token_store.set_token(token)
        self.auth_timestamp = datetime.datetime.now()
        logger.info("Session started")

    def end(self) -> None:
        """End the session and forget the token."""
        was_authenticated = self.is_authenticated()
        self.token_store.remove_token()
        self.auth_timestamp = None
        if was_authenticated:
            logger.info("Session ended")

    def is_authenticated(self) -> bool:
        return self.token_store.get_token() is not None

    def get_auth_token(self) -> Optional[str]:
        return self.token_store.get_token()

    def get_auth_headers(self) -> Dict[str, str]:
        """
        Get authentication headers for API requests.

        Returns:
            Dict[str, str]: Authorization header, or an empty dict without a token
        """
        token = self.get_auth_token()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def get_session_info(self) -> Dict[str, Any]:
        return {
            "is_authenticated": self.is_authenticated(),
            "auth_timestamp": self.auth_timestamp.isoformat() if self.auth_timestamp else None,
            "language": self.locale.language if self.locale else None,
        }
