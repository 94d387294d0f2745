"""Latest topics use case."""

import math
from uuid import UUID

from pydantic import BaseModel

from agora.config import ForumSettings
from agora.domain.model import Category
from agora.domain.service import (
    CategoryService,
    MemberService,
    PermissionService,
    TopicService,
)
from agora.domain.value import CategoryId, MemberId, PermissionSet

from .view import PermissionView, TopicView


class LatestTopicsRequest(BaseModel):
    member_id: str | None = None
    page: int = 1


class LatestTopicItem(BaseModel):
    topic: TopicView
    category_name: str
    permissions: PermissionView


class LatestTopicsResponse(BaseModel):
    """One page of the latest topics list."""

    topics: list[LatestTopicItem]
    page_index: int
    total_count: int
    total_pages: int


class LatestTopicsUseCase:
    """Use case for listing the most recent topics the viewer can see."""

    def __init__(
        self,
        topic_service: TopicService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        forum_settings: ForumSettings,
    ) -> None:
        self.topic_service = topic_service
        self.category_service = category_service
        self.permission_service = permission_service
        self.member_service = member_service
        self.forum_settings = forum_settings

    async def execute(self, request: LatestTopicsRequest) -> LatestTopicsResponse:
        """Execute latest topics flow.

        Only the ``active_topics_list_size`` most recent live topics are
        considered; topics in categories the viewer is denied are dropped
        before paging.
        """
        viewer = await self.member_service.find_by_id(
            MemberId(UUID(request.member_id)) if request.member_id else None
        )
        topics = await self.topic_service.get_recent_topics(
            self.forum_settings.active_topics_list_size
        )

        # Resolve each category's permissions once
        categories: dict[CategoryId, Category] = {}
        permissions: dict[CategoryId, PermissionSet] = {}
        items = []
        for topic in topics:
            if topic.category_id not in permissions:
                category = await self.category_service.get_by_id(topic.category_id)
                categories[category.id] = category
                permissions[category.id] = (
                    await self.permission_service.get_permissions(category, viewer)
                )

            category_permissions = permissions[topic.category_id]
            if category_permissions.denies_access:
                continue

            items.append(
                LatestTopicItem(
                    topic=TopicView.from_topic(topic),
                    category_name=categories[topic.category_id].name,
                    permissions=PermissionView.from_permissions(category_permissions),
                )
            )

        page_size = self.forum_settings.topics_per_page
        page_index = max(request.page, 1)
        start = (page_index - 1) * page_size
        return LatestTopicsResponse(
            topics=items[start : start + page_size],
            page_index=page_index,
            total_count=len(items),
            total_pages=math.ceil(len(items) / page_size) if page_size else 0,
        )
