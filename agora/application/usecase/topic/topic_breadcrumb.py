"""Topic breadcrumb use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import CategoryService, TopicService
from agora.domain.value import TopicId

from .view import CategoryView, TopicView


class TopicBreadcrumbRequest(BaseModel):
    topic_id: str  # UUID string


class TopicBreadcrumbResponse(BaseModel):
    """Categories from the root down to the topic's category, then the topic."""

    categories: list[CategoryView]
    topic: TopicView


class TopicBreadcrumbUseCase:
    def __init__(
        self, topic_service: TopicService, category_service: CategoryService
    ) -> None:
        self.topic_service = topic_service
        self.category_service = category_service

    async def execute(self, request: TopicBreadcrumbRequest) -> TopicBreadcrumbResponse:
        topic = await self.topic_service.get_by_id(TopicId(UUID(request.topic_id)))
        category = await self.category_service.get_by_id(topic.category_id)
        chain = await self.category_service.get_category_chain(category)
        return TopicBreadcrumbResponse(
            categories=[CategoryView.from_category(c) for c in chain],
            topic=TopicView.from_topic(topic),
        )
