"""Authentication routes.

Members sign in elsewhere; this API only reads the ``auth_token`` cookie and
hands out anti-forgery tokens for form posts.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from agora.config import Settings
from agora.interface.api.security import issue_csrf_token

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class CSRFTokenResponse(BaseModel):
    csrf_token: str
    header_name: str


@router.get("/csrf", response_model=CSRFTokenResponse)
async def get_csrf_token(
    response: Response, settings: FromDishka[Settings]
) -> CSRFTokenResponse:
    """Issue an anti-forgery token.

    The token is set as a cookie and returned in the body; form posts must
    send it back in the ``X-CSRF-Token`` header.
    """
    token = issue_csrf_token(response, settings)
    return CSRFTokenResponse(
        csrf_token=token, header_name=settings.auth.csrf_header_name
    )
