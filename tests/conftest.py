"""Shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import requests

from catalog_admin.auth.session_context import SessionContext, TokenStore
from catalog_admin.i18n import LocalePreference, Translator
from catalog_admin.navigation import Navigator
from catalog_admin.services.api_client import APIClient
from catalog_admin.storage import MemoryStorage
from tests.helpers import BASE_URL


@pytest.fixture
def session_context() -> SessionContext:
    return SessionContext(TokenStore(MemoryStorage()), LocalePreference(MemoryStorage()))


@pytest.fixture
def navigator() -> Navigator:
    return Navigator("/users")


@pytest.fixture
def http_session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api_client(session_context, navigator, http_session) -> APIClient:
    return APIClient(session_context, navigator, base_url=BASE_URL, http_session=http_session, timeout=5)


@pytest.fixture
def translator() -> Translator:
    return Translator(LocalePreference(MemoryStorage()))


@pytest.fixture
def fake_service() -> MagicMock:
    """Entity service double with async operations."""
    service = MagicMock()
    service.resource = "Users"
    service.list = AsyncMock()
    service.list_paged = AsyncMock()
    service.create = AsyncMock()
    service.update = AsyncMock()
    service.delete = AsyncMock()
    return service
