"""Topic routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response, status
from pydantic import BaseModel, Field

from agora.application.usecase.topic import (
    ApproveTopicRequest,
    ApproveTopicResponse,
    ApproveTopicUseCase,
    CreateTopicButtonRequest,
    CreateTopicButtonResponse,
    CreateTopicButtonUseCase,
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    LatestTopicsRequest,
    LatestTopicsResponse,
    LatestTopicsUseCase,
    MorePostsRequest,
    MorePostsResponse,
    MorePostsUseCase,
    ShowTopicRequest,
    ShowTopicResponse,
    ShowTopicUseCase,
    TopicBreadcrumbRequest,
    TopicBreadcrumbResponse,
    TopicBreadcrumbUseCase,
)
from agora.config import AuthSettings
from agora.domain.service import JWTService
from agora.interface.api.errors import handle_domain_errors
from agora.interface.api.security import (
    current_member_id,
    require_ajax,
    require_member_id,
    verify_csrf,
)
from agora.util.lang import Lang

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class CreateTopicBody(BaseModel):
    """Form fields of a new topic."""

    category_id: str
    name: str
    content: str = ""
    poll_answers: list[str] = Field(default_factory=list)
    subscribe: bool = False


class MorePostsBody(BaseModel):
    page: int = 2
    order: str | None = None


@router.get("/latest", response_model=LatestTopicsResponse)
async def latest_topics(
    request: Request,
    latest_topics_use_case: FromDishka[LatestTopicsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
    p: int = Query(default=1, ge=1),
) -> LatestTopicsResponse:
    """Recent topics the viewer can access, newest first."""
    member_id = current_member_id(request, jwt_service, auth_settings)
    with handle_domain_errors(lang, auth_settings):
        return await latest_topics_use_case.execute(
            LatestTopicsRequest(member_id=member_id, page=p)
        )


@router.get("/create-button", response_model=CreateTopicButtonResponse)
async def create_topic_button(
    request: Request,
    create_topic_button_use_case: FromDishka[CreateTopicButtonUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
    category_id: str | None = None,
) -> CreateTopicButtonResponse:
    """Whether to show the "new topic" button to the viewer."""
    member_id = current_member_id(request, jwt_service, auth_settings)
    with handle_domain_errors(lang, auth_settings):
        return await create_topic_button_use_case.execute(
            CreateTopicButtonRequest(member_id=member_id, category_id=category_id)
        )


@router.get("/{topic_id}/breadcrumb", response_model=TopicBreadcrumbResponse)
async def topic_breadcrumb(
    topic_id: str,
    topic_breadcrumb_use_case: FromDishka[TopicBreadcrumbUseCase],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
) -> TopicBreadcrumbResponse:
    """Category chain from the root category down to the topic."""
    with handle_domain_errors(lang, auth_settings):
        return await topic_breadcrumb_use_case.execute(
            TopicBreadcrumbRequest(topic_id=topic_id)
        )


@router.post("/{topic_id}/posts", response_model=MorePostsResponse)
async def more_posts(
    topic_id: str,
    request: Request,
    more_posts_use_case: FromDishka[MorePostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
    body: MorePostsBody | None = None,
) -> MorePostsResponse:
    """Load a further page of replies ("load more")."""
    body = body or MorePostsBody()
    member_id = current_member_id(request, jwt_service, auth_settings)
    with handle_domain_errors(lang, auth_settings, ajax=True):
        return await more_posts_use_case.execute(
            MorePostsRequest(
                topic_id=topic_id,
                member_id=member_id,
                page=body.page,
                order=body.order,
            )
        )


@router.post("", response_model=CreateTopicResponse)
async def create_topic(
    body: CreateTopicBody,
    request: Request,
    response: Response,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
) -> CreateTopicResponse:
    """Create a topic with its starter post.

    Requires authentication and the anti-forgery token.

    Returns:
        The created topic; 201 when it is live, 202 when it awaits moderation

    Raises:
        HTTPException: If the member may not post here, the content is
            rejected, or the topic could not be saved
    """
    member_id = require_member_id(request, jwt_service, auth_settings, lang)
    verify_csrf(request, auth_settings, lang)

    with handle_domain_errors(lang, auth_settings):
        result = await create_topic_use_case.execute(
            CreateTopicRequest(
                member_id=member_id,
                category_id=body.category_id,
                name=body.name,
                content=body.content,
                poll_answers=body.poll_answers,
                subscribe=body.subscribe,
                user_ip=request.client.host if request.client else None,
            )
        )

    response.status_code = (
        status.HTTP_202_ACCEPTED if result.pending else status.HTTP_201_CREATED
    )
    return result


@router.post("/{topic_id}/approve", response_model=ApproveTopicResponse)
async def approve_topic(
    topic_id: str,
    request: Request,
    approve_topic_use_case: FromDishka[ApproveTopicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
) -> ApproveTopicResponse:
    """Approve a topic awaiting moderation. Admins only."""
    with handle_domain_errors(lang, auth_settings, ajax=True):
        require_ajax(request, lang)
        member_id = require_member_id(request, jwt_service, auth_settings, lang)
        return await approve_topic_use_case.execute(
            ApproveTopicRequest(topic_id=topic_id, member_id=member_id)
        )


@router.get("/{slug}", response_model=ShowTopicResponse)
async def show_topic(
    slug: str,
    request: Request,
    show_topic_use_case: FromDishka[ShowTopicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    lang: FromDishka[Lang],
    p: int = Query(default=1, ge=1),
    order: str | None = None,
    quote: str | None = None,
) -> ShowTopicResponse:
    """Show a topic with one page of its replies.

    Args:
        slug: Topic slug
        p: Page of replies
        order: standard, newest, votes or all
        quote: Post ID whose content should be quoted in the reply box

    Raises:
        HTTPException: 404 if the topic does not exist, 403 if the viewer's
            group may not see its category
    """
    member_id = current_member_id(request, jwt_service, auth_settings)
    with handle_domain_errors(lang, auth_settings):
        return await show_topic_use_case.execute(
            ShowTopicRequest(
                slug=slug,
                member_id=member_id,
                page=p,
                order=order,
                quote_post_id=quote,
                user_agent=request.headers.get("user-agent"),
            )
        )
