"""Request authentication, anti-forgery and AJAX checks."""

import secrets

import logfire
from fastapi import HTTPException, Request, Response, status

from agora.config import AuthSettings, Settings
from agora.domain.service import JWTService
from agora.util.lang import Lang

AJAX_HEADER = "X-Requested-With"
AJAX_HEADER_VALUE = "XMLHttpRequest"


def current_member_id(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> str | None:
    """Member ID from the auth cookie, None for anonymous visitors."""
    token = request.cookies.get(auth_settings.auth_cookie_name)
    return jwt_service.get_member_id_from_token(token)


def require_member_id(
    request: Request,
    jwt_service: JWTService,
    auth_settings: AuthSettings,
    lang: Lang,
) -> str:
    """Member ID from the auth cookie.

    Raises:
        HTTPException: 401 if the request is not authenticated
    """
    member_id = current_member_id(request, jwt_service, auth_settings)
    if not member_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=lang("errors.authentication_required"),
        )
    return member_id


def require_ajax(request: Request, lang: Lang) -> None:
    """Reject requests not sent by the forum's scripts.

    Raises:
        HTTPException: 400 with the generic message
    """
    if request.headers.get(AJAX_HEADER) != AJAX_HEADER_VALUE:
        logfire.info("Non-ajax request to ajax action", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=lang("errors.generic")
        )


def issue_csrf_token(response: Response, settings: Settings) -> str:
    """Set a fresh anti-forgery cookie and return its value.

    The client echoes the value in the CSRF header on form posts.
    """
    token = secrets.token_urlsafe(32)
    response.set_cookie(
        key=settings.auth.csrf_cookie_name,
        value=token,
        httponly=False,  # Read by the frontend to fill the header
        secure=settings.api.protocol == "https",
        samesite="lax",
        path="/",
    )
    return token


def verify_csrf(request: Request, auth_settings: AuthSettings, lang: Lang) -> None:
    """Check the anti-forgery header matches the anti-forgery cookie.

    Raises:
        HTTPException: 400 if the token is missing or does not match
    """
    cookie = request.cookies.get(auth_settings.csrf_cookie_name)
    header = request.headers.get(auth_settings.csrf_header_name)
    if not cookie or not header or not secrets.compare_digest(
        cookie.encode(), header.encode()
    ):
        logfire.warn("Anti-forgery check failed", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=lang("errors.invalid_form_token"),
        )
