"""Mapping of domain errors to HTTP responses.

Every error detail is a message from the forum's message catalog, so
clients can show it as-is.
"""

from contextlib import contextmanager
from typing import Iterator

import logfire
from fastapi import HTTPException, status

from agora.config import AuthSettings
from agora.domain.error import (
    AccessDeniedError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    TransactionError,
)
from agora.util.lang import Lang


def logoff_headers(auth_settings: AuthSettings) -> dict[str, str]:
    """Headers that clear the auth cookie, logging the member off."""
    return {
        "set-cookie": (
            f'{auth_settings.auth_cookie_name}=""; Max-Age=0; Path=/; '
            "HttpOnly; SameSite=lax"
        )
    }


@contextmanager
def handle_domain_errors(
    lang: Lang, auth_settings: AuthSettings, ajax: bool = False
) -> Iterator[None]:
    """Translate errors raised by a use case into HTTP exceptions.

    Args:
        lang: Message catalog
        auth_settings: Used to clear the auth cookie of members without access
        ajax: Whether unexpected errors should also become a 500 with the
            generic message (they propagate otherwise)
    """
    try:
        yield
    except HTTPException:
        raise
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=lang(e.message_key)
        )
    except NotAuthorizedError as e:
        logfire.warn("Logging off member without access", member_id=e.member_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=lang(e.message_key),
            headers=logoff_headers(auth_settings),
        )
    except AccessDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=lang(e.message_key)
        )
    except TransactionError as e:
        logfire.error("Transaction failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=lang(e.message_key),
        )
    except DomainError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=lang(e.message_key)
        )
    except ValueError as e:
        # Malformed identifiers in paths and bodies
        logfire.info("Invalid request value", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=lang("errors.generic")
        )
    except Exception as e:
        if not ajax:
            raise
        logfire.exception("Unhandled error in ajax action", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=lang("errors.generic"),
        )
