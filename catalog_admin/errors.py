"""
Error types and error handling utilities for the Catalog Admin client.

Authentication failures are raised by the request gateway and never reach
the user as ordinary errors. Everything else is mapped to a short message
that the calling page shows inline or as a notification.
"""

import logging
import traceback
from typing import Any, Optional, Union

from catalog_admin.i18n import DEFAULT_LANGUAGE, Translator


class CatalogAdminError(Exception):
    """Base class for errors raised by the admin client."""


class SessionExpiredError(CatalogAdminError):
    """Raised when the backend rejects the session with 401 or 403."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Unauthorized ({status_code})")


class ResponseParseError(CatalogAdminError):
    """Raised when a successful response does not carry a valid result envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


SENSITIVE_KEYS = ('password', 'token', 'secret', 'key', 'credential')


def redact(data: Any) -> Any:
    """Return a copy of a dict with sensitive values masked."""
    if not isinstance(data, dict):
        return data
    return {
        key: "***REDACTED***" if any(s in str(key).lower() for s in SENSITIVE_KEYS) else value
        for key, value in data.items()
    }


class ErrorHandler:
    """
    Centralized error handling for the admin client.

    Each handler logs the failure and returns the message to show to the user,
    in the translator's current language.
    """

    def __init__(self, translator=None, logger_name: str = "catalog_admin.errors"):
        """
        Initialize the error handler.

        Args:
            translator: Translator for user-facing messages (English if omitted)
            logger_name (str): Name of the logger failures are written to
        """
        self.translator = translator or Translator(language=DEFAULT_LANGUAGE)
        self.logger = logging.getLogger(logger_name)

    def handle_network_error(self, exception: Exception, context: str = "") -> str:
        """
        Handle network-related errors.

        Args:
            exception: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            str: User-facing error message
        """
        context_info = f" during {context}" if context else ""
        self.logger.error(
            f"Network error{context_info}: {type(exception).__name__} - {exception}")
        self.logger.debug(traceback.format_exc())
        return self.translator.t("General.errorServer")

    def handle_http_error(self, status_code: int, body: Any = None, context: str = "") -> str:
        """
        Handle a failed response that does not carry a result envelope.

        Args:
            status_code: HTTP status of the response
            body: Decoded JSON body, if any
            context: Additional context about where the error occurred

        Returns:
            str: User-facing error message
        """
        error_msg = f"{self.translator.t('General.requestFailed')}: {status_code}"
        if isinstance(body, dict):
            for field in ('detail', 'message', 'error', 'title'):
                if body.get(field):
                    error_msg += f" - {body[field]}"
                    break

        self.logger.error(f"HTTP error{' during ' + context if context else ''}: {error_msg}")
        return error_msg

    def handle_data_error(self, error_info: Union[str, Exception], data: Any = None,
                          context: str = "") -> str:
        """
        Handle data-related errors.

        Args:
            error_info: Error information (string or exception)
            data: The data causing the error (sensitive fields are redacted in logs)
            context: Additional context about where the error occurred

        Returns:
            str: Description of the error. Pages log it and show their own message.
        """
        if isinstance(error_info, Exception):
            message = f"{type(error_info).__name__} - {error_info}"
        else:
            message = str(error_info)

        self.logger.error(f"Data error{' during ' + context if context else ''}: {message}")
        if data is not None:
            self.logger.debug(f"Error with data: {redact(data)}")
        return message

    def handle_auth_error(self, error: SessionExpiredError, context: str = "") -> None:
        """
        Record an authentication failure.

        The gateway has already cleared the session and redirected to the login
        page, so nothing is returned for display.
        """
        self.logger.warning(
            f"Session ended{' during ' + context if context else ''}: {error}")
