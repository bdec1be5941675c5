"""Tests for the back office login backend."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from cinebook.admin.auth import AdminAuth
from cinebook.config import settings


def make_request(form: dict | None = None, session: dict | None = None) -> MagicMock:
    request = MagicMock()
    request.form = AsyncMock(return_value=form or {})
    request.session = session if session is not None else {}
    request.client.host = "10.0.0.7"
    return request


@pytest.fixture
def auth(monkeypatch: pytest.MonkeyPatch) -> AdminAuth:
    monkeypatch.setattr(settings, "admin_username", "staff")
    monkeypatch.setattr(settings, "admin_password", "s3cret")
    return AdminAuth(secret_key="test")


async def test_valid_login_marks_session(auth: AdminAuth) -> None:
    request = make_request({"username": "staff", "password": "s3cret"})

    assert await auth.login(request) is True
    assert request.session == {"authenticated": True, "username": "staff"}
    assert await auth.authenticate(request) is True


async def test_wrong_password_is_rejected_and_logged(auth: AdminAuth, caplog) -> None:
    request = make_request({"username": "staff", "password": "guess"})

    with caplog.at_level(logging.WARNING, logger="cinebook.admin.auth"):
        assert await auth.login(request) is False

    assert request.session == {}
    assert "Failed back office login for 'staff' from 10.0.0.7" in caplog.text


async def test_missing_fields_are_rejected(auth: AdminAuth) -> None:
    assert await auth.login(make_request({})) is False


async def test_logout_clears_session(auth: AdminAuth) -> None:
    request = make_request(session={"authenticated": True, "username": "staff"})

    assert await auth.logout(request) is True
    assert request.session == {}
    assert await auth.authenticate(request) is False
