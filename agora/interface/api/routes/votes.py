"""Vote routes.

Both actions are AJAX-only and require an authenticated member.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    MarkSolutionRequest,
    MarkSolutionResponse,
    MarkSolutionUseCase,
)
from agora.config import AuthSettings
from agora.domain.service import JWTService
from agora.domain.value import VoteDirection
from agora.interface.api.errors import handle_domain_errors
from agora.interface.api.security import require_ajax, require_member_id
from agora.util.lang import Lang

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    direction: VoteDirection


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: str,
    body: VoteBody,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
) -> CastVoteResponse:
    """Up- or down-vote a post.

    A vote that breaks the voting rules is not an error: the response has
    ``accepted`` false and the post's unchanged vote count.

    Args:
        post_id: Post UUID
        body: Vote direction
        request: Incoming request (AJAX header and auth cookie)
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_settings: Cookie names
        lang: Message catalog

    Returns:
        Whether the vote was accepted, the resulting count and the points
        moved on the author's balance

    Raises:
        HTTPException: If not AJAX, not authenticated, or the post is missing
    """
    with handle_domain_errors(lang, auth_settings, ajax=True):
        require_ajax(request, lang)
        member_id = require_member_id(request, jwt_service, auth_settings, lang)
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                post_id=post_id, member_id=member_id, direction=body.direction
            )
        )


@router.post("/posts/{post_id}/solution", response_model=MarkSolutionResponse)
async def mark_post_as_solution(
    post_id: str,
    request: Request,
    mark_solution_use_case: FromDishka[MarkSolutionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
) -> MarkSolutionResponse:
    """Mark a reply as the solution of its topic.

    Only the topic's creator may do this, once per topic.
    """
    with handle_domain_errors(lang, auth_settings, ajax=True):
        require_ajax(request, lang)
        member_id = require_member_id(request, jwt_service, auth_settings, lang)
        return await mark_solution_use_case.execute(
            MarkSolutionRequest(post_id=post_id, member_id=member_id)
        )
