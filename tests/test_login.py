"""Tests for the authentication service and the login flow."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
import requests

from catalog_admin.auth.auth_service import AuthenticationService
from catalog_admin.controllers.login_controller import LoginController
from catalog_admin.controllers.notifications import ERROR
from catalog_admin.data.models import LoginDto
from catalog_admin.errors import ResponseParseError
from catalog_admin.navigation import HOME_PATH, LOGIN_PATH, Navigator
from catalog_admin.services.entities import UserService
from tests.helpers import BASE_URL, envelope, make_response


@pytest.fixture
def auth_service(session_context, http_session) -> AuthenticationService:
    return AuthenticationService(session_context, base_url=BASE_URL, http_session=http_session, timeout=5)


@pytest.fixture
def login_navigator() -> Navigator:
    return Navigator(LOGIN_PATH)


@pytest.fixture
def login(auth_service, session_context, login_navigator, translator) -> LoginController:
    return LoginController(auth_service, session_context, login_navigator, translator, toast_duration_ms=30)


@pytest.mark.asyncio
async def test_login_posts_credentials_directly(auth_service, http_session) -> None:
    http_session.post.return_value = make_response(200, envelope({"accessToken": "tok123"}))

    result = await auth_service.login(LoginDto(user_name="a@b.com", password="secret1"))

    args, kwargs = http_session.post.call_args
    assert args[0] == f"{BASE_URL}/Authentication/login"
    assert kwargs["json"] == {"userName": "a@b.com", "password": "secret1"}
    assert "Authorization" not in kwargs["headers"]
    http_session.request.assert_not_called()
    assert result.success
    assert result.data.access_token == "tok123"


def test_login_rejects_non_envelope(auth_service, http_session) -> None:
    http_session.post.return_value = make_response(500, text="Internal Server Error")

    with pytest.raises(ResponseParseError):
        auth_service.sync_login(LoginDto(user_name="a@b.com", password="secret1"))


@pytest.mark.asyncio
async def test_successful_login_stores_token_and_authenticates_later_calls(
    login: LoginController, session_context, login_navigator, api_client, http_session
) -> None:
    http_session.post.return_value = make_response(200, envelope({"accessToken": "tok123"}))
    http_session.request.return_value = make_response(200, envelope([]))

    assert await login.submit("a@b.com", "secret1")

    assert session_context.get_auth_token() == "tok123"
    assert login_navigator.current_path == HOME_PATH

    await UserService(api_client).list()
    assert http_session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer tok123"


@pytest.mark.asyncio
async def test_rejected_login_shows_server_message(login: LoginController, session_context, http_session) -> None:
    http_session.post.return_value = make_response(
        200, envelope(None, success=False, message="Invalid credentials"))

    assert not await login.submit("a@b.com", "wrongpass")

    assert not session_context.is_authenticated()
    assert login.toast.message == "Invalid credentials"
    assert login.toast.kind == ERROR


@pytest.mark.asyncio
async def test_rejected_login_prefers_message_inside_data(login: LoginController, http_session) -> None:
    http_session.post.return_value = make_response(
        401, envelope({"message": "Account locked"}, success=False, message="Unauthorized"))

    assert not await login.submit("a@b.com", "secret1")

    assert login.toast.message == "Account locked"


@pytest.mark.asyncio
async def test_success_without_token_is_a_failure(login: LoginController, session_context, http_session) -> None:
    http_session.post.return_value = make_response(200, envelope({}))

    assert not await login.submit("a@b.com", "secret1")

    assert not session_context.is_authenticated()
    assert login.toast.message == "Login failed"


@pytest.mark.asyncio
async def test_network_failure_shows_connection_error(login: LoginController, session_context, http_session) -> None:
    session_context.begin("existing")
    http_session.post.side_effect = requests.ConnectionError("refused")

    assert not await login.submit("a@b.com", "secret1")

    assert login.toast.message == "Error connecting to server"
    assert session_context.get_auth_token() == "existing"


@pytest.mark.asyncio
async def test_invalid_form_is_not_sent(login: LoginController, http_session) -> None:
    assert not await login.submit("not-an-email", "123")

    assert login.field_errors == {
        "email": "Invalid email format",
        "password": "Password must be at least 6 characters",
    }
    http_session.post.assert_not_called()


@pytest.mark.asyncio
async def test_missing_fields_are_reported(login: LoginController) -> None:
    assert not await login.submit("", "")

    assert login.field_errors == {"email": "Email is required", "password": "Password is required"}


@pytest.mark.asyncio
async def test_toast_dismisses_itself(login: LoginController, http_session) -> None:
    http_session.post.return_value = make_response(200, envelope(None, success=False, message="Nope"))

    await login.submit("a@b.com", "secret1")
    assert login.toast.visible

    await asyncio.sleep(0.1)

    assert not login.toast.visible


@pytest.mark.asyncio
async def test_toast_can_be_dismissed_manually(login: LoginController, http_session) -> None:
    http_session.post.return_value = make_response(200, envelope(None, success=False, message="Nope"))
    await login.submit("a@b.com", "secret1")

    login.toast.dismiss()

    assert login.toast.message is None


@pytest.mark.asyncio
async def test_concurrent_submissions_are_not_deduplicated(session_context, translator) -> None:
    auth = MagicMock()
    auth.login = AsyncMock(return_value=MagicMock(success=False, data=None, message="No"))
    controller = LoginController(auth, session_context, Navigator(LOGIN_PATH), translator, toast_duration_ms=30)

    await asyncio.gather(controller.submit("a@b.com", "secret1"), controller.submit("a@b.com", "secret1"))

    assert auth.login.await_count == 2


def test_logout_ends_session(auth_service, session_context) -> None:
    session_context.begin("tok")

    auth_service.logout()

    assert not session_context.is_authenticated()
