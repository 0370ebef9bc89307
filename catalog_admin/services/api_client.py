"""
Authenticated API client for the Catalog Admin backend.

Every entity service call goes through this client. It attaches the bearer
token when one exists and ends the session on 401/403 responses. Other
statuses are handed back untouched for the caller to interpret.
"""

import asyncio
import functools
import logging
import threading
from typing import Any, Dict, Optional

import requests

from catalog_admin.config import AppSettings
from catalog_admin.errors import SessionExpiredError
from catalog_admin.navigation import LOGIN_PATH

logger = logging.getLogger("catalog_admin.api_client")

AUTH_FAILURE_STATUSES = (401, 403)


def build_url(base_url: str, endpoint: str) -> str:
    """Join the base URL and an endpoint path without doubling slashes."""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


class APIClient:
    """Client for communicating with the admin backend on behalf of a session."""

    def __init__(self, session_context, navigator, base_url: str = None,
                 http_session: Optional[requests.Session] = None, timeout: float = None):
        """
        Initialize the API client.

        Args:
            session_context: SessionContext supplying the access token
            navigator: Navigator used to return to the login page
            base_url (str, optional): Base URL for the API server. Defaults to AppSettings.API_BASE_URL.
            http_session (requests.Session, optional): Session used to send requests.
                Requests from this client never use it concurrently.
            timeout (float, optional): Request timeout in seconds
        """
        self.base_url = base_url or AppSettings.API_BASE_URL
        self.session_context = session_context
        self.navigator = navigator
        self.http_session = http_session or requests.Session()
        self.timeout = timeout if timeout is not None else AppSettings.REQUEST_TIMEOUT
        self._send_lock = threading.Lock()

        logger.info(f"API client initialized for {self.base_url}")

    def _send(self, method: str, url: str, json: Any = None,
              params: Dict[str, Any] = None,
              headers: Dict[str, str] = None) -> requests.Response:
        """Blocking part of a request; safe to run on a worker thread."""
        safe_headers = {k: v for k, v in (headers or {}).items() if k.lower() != 'authorization'}
        logger.info(f"Making {method} request to {url}")
        logger.debug(f"Headers: {safe_headers}")
        if params:
            logger.debug(f"Params: {params}")

        # requests.Session is not thread-safe; one request at a time per client
        with self._send_lock:
            response = self.http_session.request(
                method=method,
                url=url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout
            )

        logger.info(f"Response status: {response.status_code}")
        return response

    def _check_authorization(self, response: requests.Response, method: str, url: str) -> requests.Response:
        """
        End the session on 401/403, otherwise hand the response back.

        Must run on the caller's thread: it clears the token and notifies the
        navigator's listeners.
        """
        if response.status_code in AUTH_FAILURE_STATUSES:
            logger.warning(
                f"Authorization failed ({response.status_code}) for {method} {url}, ending session")
            self.session_context.end()
            self.navigator.navigate(LOGIN_PATH)
            raise SessionExpiredError(response.status_code, url)
        return response

    def _prepare(self, endpoint: str, headers: Optional[Dict[str, str]]):
        url = build_url(self.base_url, endpoint)
        request_headers = {**(headers or {}), **self.session_context.get_auth_headers()}
        return url, request_headers

    def sync_request(self, method: str, endpoint: str, json: Any = None,
                     params: Dict[str, Any] = None,
                     headers: Dict[str, str] = None) -> requests.Response:
        """
        Send a request, attaching the bearer token if the session has one.

        Args:
            method (str): HTTP method (GET, POST, etc.)
            endpoint (str): API endpoint path (without base URL)
            json (Any, optional): Request body, sent as JSON
            params (Dict[str, Any], optional): Query parameters
            headers (Dict[str, str], optional): Additional headers

        Returns:
            requests.Response: The raw response for any status other than 401/403

        Raises:
            SessionExpiredError: The backend rejected the session. The token has
                been cleared and the application sent to the login page.
            requests.RequestException: The request could not be completed
        """
        url, request_headers = self._prepare(endpoint, headers)
        response = self._send(method.upper(), url, json=json, params=params, headers=request_headers)
        return self._check_authorization(response, method.upper(), url)

    async def request(self, method: str, endpoint: str, json: Any = None,
                      params: Dict[str, Any] = None,
                      headers: Dict[str, str] = None) -> requests.Response:
        """
        Async version of sync_request.

        Only the blocking send runs on the event loop's default executor; the
        token is read and the session ended on the loop thread.
        """
        url, request_headers = self._prepare(endpoint, headers)
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(
            None,
            functools.partial(
                self._send,
                method.upper(),
                url,
                json=json,
                params=params,
                headers=request_headers
            )
        )
        return self._check_authorization(response, method.upper(), url)
