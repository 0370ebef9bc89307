"""
Authentication service for the Catalog Admin client.

Login talks to the backend directly: no token exists yet, so the request
gateway is not involved.
"""

import asyncio
import functools
import logging
import threading
from typing import Optional

import requests
from pydantic import ValidationError

from catalog_admin.config import AppSettings
from catalog_admin.data.models import ApiResult, LoginDto, LoginUserResponseDto
from catalog_admin.errors import ResponseParseError
from catalog_admin.services.api_client import build_url

logger = logging.getLogger("catalog_admin.auth")

LOGIN_ENDPOINT = "Authentication/login"


class AuthenticationService:
    """Exchanges credentials for an access token."""

    def __init__(self, session_context, base_url: str = None,
                 http_session: Optional[requests.Session] = None, timeout: float = None):
        self.session_context = session_context
        self.api_base_url = base_url or AppSettings.API_BASE_URL
        self.http_session = http_session or requests.Session()
        self.timeout = timeout if timeout is not None else AppSettings.REQUEST_TIMEOUT
        self._send_lock = threading.Lock()

    def sync_login(self, dto: LoginDto) -> ApiResult[LoginUserResponseDto]:
        """
        Authenticate with the API using user name and password.

        Args:
            dto (LoginDto): Credentials

        Returns:
            ApiResult[LoginUserResponseDto]: The backend's result envelope

        Raises:
            requests.RequestException: The backend could not be reached
            ResponseParseError: The response was not a result envelope
        """
        url = build_url(self.api_base_url, LOGIN_ENDPOINT)
        logger.info(f"Authenticating {dto.user_name} against {url}")

        with self._send_lock:
            response = self.http_session.post(
                url,
                json=dto.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
        logger.info(f"Authentication response status: {response.status_code}")

        try:
            return ApiResult[LoginUserResponseDto].model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ResponseParseError(
                f"Invalid login response: {e}", response.status_code) from e

    async def login(self, dto: LoginDto) -> ApiResult[LoginUserResponseDto]:
        """Async version of sync_login."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(self.sync_login, dto))

    def logout(self) -> None:
        """End the current session."""
        self.session_context.end()
        logger.info("Logged out")
