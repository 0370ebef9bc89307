"""Tests for the entity services."""

import pytest
import requests

from catalog_admin.controllers.users_page import UsersPageController
from catalog_admin.data.models import (
    CreateProductDto, CreateUserDto, ProductDto, UpdateUserDto, UserDto
)
from catalog_admin.errors import ErrorHandler, ResponseParseError, SessionExpiredError
from catalog_admin.services.entities import ProductCategoryService, ProductService, UserService
from tests.helpers import BASE_URL, envelope, make_response, user_json


@pytest.fixture
def users(api_client) -> UserService:
    return UserService(api_client)


@pytest.mark.asyncio
async def test_list_paged_parses_page(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(200, envelope({
        "items": [user_json(6), user_json(7)],
        "totalItems": 12,
        "page": 2,
        "totalPages": 3,
        "pageSize": 5,
    }))

    result = await users.list_paged(2, 5)

    kwargs = http_session.request.call_args.kwargs
    assert kwargs["url"] == f"{BASE_URL}/Users/paged"
    assert kwargs["params"] == {"page": 2, "pageSize": 5}
    assert result.success
    assert result.data.total_pages == 3
    assert result.data.total_items == 12
    assert result.data.has_previous
    assert result.data.has_next
    assert len(result.data.items) <= result.data.page_size
    assert isinstance(result.data.items[0], UserDto)
    assert result.data.items[0].first_name == "First6"


@pytest.mark.asyncio
async def test_list_and_get_by_id(users: UserService, http_session) -> None:
    http_session.request.side_effect = [
        make_response(200, envelope([user_json(1), user_json(2)])),
        make_response(200, envelope(user_json(2))),
    ]

    listed = await users.list()
    single = await users.get_by_id("u2")

    assert [u.id for u in listed.data] == ["u1", "u2"]
    assert single.data.email == "user2@example.com"
    assert http_session.request.call_args.kwargs["url"] == f"{BASE_URL}/Users/u2"


@pytest.mark.asyncio
async def test_create_sends_camel_case_body(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(200, envelope(user_json(1)))

    result = await users.create(CreateUserDto(
        first_name="Ada", last_name="Lovelace", email="ada@example.com",
        phone="555-1234567", password="secret1"))

    kwargs = http_session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["json"] == {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "555-1234567",
        "password": "secret1",
    }
    assert result.success


@pytest.mark.asyncio
async def test_update_omits_unset_password(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(200, envelope(user_json(1)))

    await users.update("u1", UpdateUserDto(
        id="u1", first_name="Ada", last_name="L", email="ada@example.com", phone="5551234567"))

    kwargs = http_session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == f"{BASE_URL}/Users/u1"
    assert "password" not in kwargs["json"]
    assert kwargs["json"]["id"] == "u1"


@pytest.mark.asyncio
async def test_second_delete_reports_failure(users: UserService, http_session) -> None:
    http_session.request.side_effect = [
        make_response(200, envelope(None)),
        make_response(404, envelope(None, success=False, message="User not found")),
    ]

    first = await users.delete("u1")
    second = await users.delete("u1")

    assert first.success
    assert not second.success
    assert second.message == "User not found"


@pytest.mark.asyncio
async def test_failure_envelope_on_server_error(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(
        500, envelope(None, success=False, message="Database unavailable"))

    result = await users.list()

    assert not result.success
    assert result.data is None
    assert result.message == "Database unavailable"


@pytest.mark.asyncio
async def test_non_envelope_error_body(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(502, text="<html>Bad gateway</html>")

    result = await users.list()

    assert not result.success
    assert result.message == "Request failed: 502"


@pytest.mark.asyncio
async def test_problem_details_body(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(400, {"title": "One or more validation errors occurred."})

    result = await users.create(CreateUserDto(
        first_name="A", last_name="B", email="a@b.com", phone="5551234567", password="secret1"))

    assert not result.success
    assert result.message == "Request failed: 400 - One or more validation errors occurred."


@pytest.mark.asyncio
async def test_network_error_becomes_failure(users: UserService, http_session) -> None:
    http_session.request.side_effect = requests.ConnectionError("connection refused")

    result = await users.list_paged(1, 5)

    assert not result.success
    assert result.message == "Error connecting to server"


@pytest.mark.asyncio
async def test_unparseable_success_body_raises(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(200, text="not json")

    with pytest.raises(ResponseParseError):
        await users.list()


@pytest.mark.asyncio
async def test_success_body_with_wrong_shape_raises(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(200, {"items": []})

    with pytest.raises(ResponseParseError):
        await users.list_paged(1, 5)


@pytest.mark.asyncio
async def test_auth_failure_propagates(users: UserService, session_context, http_session) -> None:
    session_context.begin("tok")
    http_session.request.return_value = make_response(401, envelope(None, success=False))

    with pytest.raises(SessionExpiredError):
        await users.get_by_id("u1")

    assert not session_context.is_authenticated()


@pytest.mark.asyncio
async def test_each_call_is_a_fresh_round_trip(users: UserService, http_session) -> None:
    http_session.request.return_value = make_response(200, envelope([]))

    await users.list()
    await users.list()

    assert http_session.request.call_count == 2


@pytest.mark.asyncio
async def test_product_and_category_resources(api_client, http_session) -> None:
    http_session.request.return_value = make_response(200, envelope({
        "id": 7, "name": "Lamp", "description": "Desk lamp", "categoryId": 3,
    }))

    result = await ProductService(api_client).create(
        CreateProductDto(name="Lamp", description="Desk lamp", category_id="3"))

    assert http_session.request.call_args.kwargs["url"] == f"{BASE_URL}/Products"
    assert http_session.request.call_args.kwargs["json"]["categoryId"] == "3"
    assert isinstance(result.data, ProductDto)
    assert result.data.id == "7"
    assert result.data.category_id == "3"

    http_session.request.return_value = make_response(200, envelope([]))
    await ProductCategoryService(api_client).list()
    assert http_session.request.call_args.kwargs["url"] == f"{BASE_URL}/ProductCategories"


@pytest.mark.asyncio
async def test_failures_are_reported_in_the_active_language(api_client, http_session, translator) -> None:
    translator.change_language("es")
    handler = ErrorHandler(translator)
    page = UsersPageController(UserService(api_client, handler), translator, error_handler=handler)
    http_session.request.side_effect = requests.ConnectionError("connection refused")

    await page.load()
    assert page.error == "Error al conectar con el servidor"

    http_session.request.side_effect = None
    http_session.request.return_value = make_response(502, text="<html>Bad gateway</html>")

    await page.refresh()
    assert page.error == "La solicitud falló: 502"
