"""Auth token domain service."""

import logfire
from pydantic import ValidationError

from agora.config import AuthSettings
from agora.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Reads and signs the tokens carried in the auth cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, member_id: str, username: str) -> str:
        """Sign a token for a member (used by the sign-in service and tests)."""
        return create_token(member_id, username, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except ValidationError as e:
            raise JWTError("Token claims are malformed") from e

    def get_member_id_from_token(self, token: str | None) -> str | None:
        """Member ID of a valid token; None for a missing or bad one.

        A bad token makes the visitor anonymous rather than failing the
        request.
        """
        if not token:
            return None

        try:
            return self.verify_token(token).member_id
        except JWTError as e:
            logfire.debug("Treating request as anonymous", reason=str(e))
            return None
