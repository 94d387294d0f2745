"""Auth cookie tokens.

Members sign in through another service, which issues the HS256 token this
API reads from the ``auth_token`` cookie.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from agora.config import AuthSettings


class TokenPayload(BaseModel):
    member_id: str
    username: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """The token is malformed, forged or expired."""

    pass


def create_token(member_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a token for a member, valid for ``settings.jwt_expiry_days``."""
    issued = datetime.now(timezone.utc)
    payload = {
        "member_id": member_id,
        "username": username,
        "iat": issued,
        "exp": issued + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "member_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e
    return TokenPayload(**claims)
