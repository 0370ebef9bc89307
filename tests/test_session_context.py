"""Tests for token storage and the session context."""

import pytest

from catalog_admin.auth.session_context import TOKEN_KEY, SessionContext, TokenStore
from catalog_admin.storage import JsonFileStorage, MemoryStorage


def test_token_store_set_get_remove() -> None:
    store = TokenStore(MemoryStorage())

    assert store.get_token() is None
    store.set_token("abc")
    assert store.get_token() == "abc"
    store.remove_token()
    assert store.get_token() is None


def test_session_begin_and_end(session_context: SessionContext) -> None:
    assert not session_context.is_authenticated()
    assert session_context.get_auth_headers() == {}

    session_context.begin("tok123")

    assert session_context.is_authenticated()
    assert session_context.get_auth_headers() == {"Authorization": "Bearer tok123"}
    assert session_context.get_session_info()["is_authenticated"] is True

    session_context.end()

    assert not session_context.is_authenticated()
    assert session_context.get_auth_headers() == {}


def test_begin_requires_a_token(session_context: SessionContext) -> None:
    with pytest.raises(ValueError):
        session_context.begin("")
    assert not session_context.is_authenticated()


def test_begin_replaces_previous_token(session_context: SessionContext) -> None:
    session_context.begin("first")
    session_context.begin("second")

    assert session_context.get_auth_token() == "second"


def test_file_storage_survives_new_instances(tmp_path) -> None:
    path = tmp_path / "session.json"
    SessionContext(TokenStore(JsonFileStorage(str(path)))).begin("persisted")

    reloaded = SessionContext(TokenStore(JsonFileStorage(str(path))))

    assert reloaded.get_auth_token() == "persisted"


def test_file_storage_removed_after_logout(tmp_path) -> None:
    path = tmp_path / "nested" / "session.json"
    context = SessionContext(TokenStore(JsonFileStorage(str(path))))

    context.begin("tok")
    assert path.exists()
    context.end()

    assert not path.exists()


def test_file_storage_ignores_corrupt_file(tmp_path) -> None:
    path = tmp_path / "session.json"
    path.write_text("{not json")

    storage = JsonFileStorage(str(path))

    assert storage.get_item(TOKEN_KEY) is None
