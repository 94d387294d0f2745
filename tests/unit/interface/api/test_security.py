"""Unit tests for request security checks."""

import pytest
from fastapi import HTTPException, Request

from agora.config import AuthSettings, ForumSettings
from agora.domain.service import JWTService
from agora.interface.api.security import (
    current_member_id,
    require_ajax,
    require_member_id,
    verify_csrf,
)
from agora.util.lang import Lang


def _request(headers: dict[str, str] | None = None) -> Request:
    """Bare ASGI request carrying ``headers`` (cookies go in ``cookie``)."""
    raw = [
        (name.lower().encode(), value.encode())
        for name, value in (headers or {}).items()
    ]
    return Request({"type": "http", "method": "POST", "path": "/", "headers": raw})


@pytest.fixture
def lang():
    return Lang(ForumSettings())


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret")


class TestAuthentication:
    def test_valid_cookie_yields_member_id(self, auth_settings, lang):
        jwt_service = JWTService(auth_settings)
        token = jwt_service.create_token("member-1", "alice")
        request = _request({"Cookie": f"auth_token={token}"})

        assert current_member_id(request, jwt_service, auth_settings) == "member-1"
        assert (
            require_member_id(request, jwt_service, auth_settings, lang)
            == "member-1"
        )

    def test_invalid_cookie_is_anonymous(self, auth_settings):
        jwt_service = JWTService(auth_settings)
        request = _request({"Cookie": "auth_token=garbage"})

        assert current_member_id(request, jwt_service, auth_settings) is None

    def test_missing_cookie_is_401(self, auth_settings, lang):
        jwt_service = JWTService(auth_settings)

        with pytest.raises(HTTPException) as exc_info:
            require_member_id(_request(), jwt_service, auth_settings, lang)

        assert exc_info.value.status_code == 401


class TestRequireAjax:
    def test_ajax_header_passes(self, lang):
        require_ajax(_request({"X-Requested-With": "XMLHttpRequest"}), lang)

    def test_missing_header_is_400(self, lang):
        with pytest.raises(HTTPException) as exc_info:
            require_ajax(_request(), lang)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == lang("errors.generic")


class TestVerifyCsrf:
    def test_matching_cookie_and_header_pass(self, auth_settings, lang):
        request = _request({"Cookie": "csrf_token=abc", "X-CSRF-Token": "abc"})

        verify_csrf(request, auth_settings, lang)

    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Cookie": "csrf_token=abc"},
            {"X-CSRF-Token": "abc"},
            {"Cookie": "csrf_token=abc", "X-CSRF-Token": "xyz"},
        ],
    )
    def test_missing_or_mismatched_token_is_400(self, auth_settings, lang, headers):
        with pytest.raises(HTTPException) as exc_info:
            verify_csrf(_request(headers), auth_settings, lang)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == lang("errors.invalid_form_token")
