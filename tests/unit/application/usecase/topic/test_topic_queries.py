"""Unit tests for the read-only topic use cases."""

from datetime import datetime, timedelta

import pytest

from agora.application.usecase.topic import (
    CreateTopicButtonRequest,
    CreateTopicButtonUseCase,
    LatestTopicsRequest,
    LatestTopicsUseCase,
    MorePostsRequest,
    MorePostsUseCase,
    TopicBreadcrumbRequest,
    TopicBreadcrumbUseCase,
)
from agora.domain.error import NotFoundError
from agora.domain.repository import CategoryRepository, TopicRepository
from agora.domain.value import MemberGroup, Permission
from tests.conftest import grant, make_category, make_topic, seed_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMorePosts:
    """Tests for loading further pages of replies."""

    @pytest.mark.asyncio
    async def test_returns_requested_page(self, unit_env):
        use_case = await unit_env.get(MorePostsUseCase)
        seeded = await seed_thread(unit_env, replies=12)

        response = await use_case.execute(
            MorePostsRequest(topic_id=str(seeded["topic"].id), page=2)
        )

        assert [p.content for p in response.posts] == ["Reply 11", "Reply 12"]
        assert response.page_index == 2
        assert response.total_pages == 2

    @pytest.mark.asyncio
    async def test_denied_viewer_gets_empty_page(self, unit_env):
        use_case = await unit_env.get(MorePostsUseCase)
        seeded = await seed_thread(unit_env, replies=12)
        await grant(
            unit_env, seeded["category"], MemberGroup.GUEST, Permission.DENY_ACCESS
        )

        response = await use_case.execute(
            MorePostsRequest(topic_id=str(seeded["topic"].id), page=2)
        )

        assert response.posts == []


class TestLatestTopics:
    """Tests for the latest topics list."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_permissions(self, unit_env):
        # Arrange
        use_case = await unit_env.get(LatestTopicsUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        seeded = await seed_thread(unit_env)
        newer = await topic_repo.save(
            make_topic(
                seeded["category"],
                seeded["creator"],
                name="Newer topic",
                created_at=datetime.now(),
            )
        )

        # Act
        response = await use_case.execute(
            LatestTopicsRequest(member_id=str(seeded["voter"].id))
        )

        # Assert
        assert [item.topic.topic_id for item in response.topics] == [
            str(newer.id),
            str(seeded["topic"].id),
        ]
        assert response.topics[0].category_name == "General"
        assert response.topics[0].permissions.create_topics
        assert response.total_count == 2
        assert response.total_pages == 1

    @pytest.mark.asyncio
    async def test_skips_denied_categories_and_pending_topics(self, unit_env):
        # Arrange
        use_case = await unit_env.get(LatestTopicsUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        category_repo = await unit_env.get(CategoryRepository)
        seeded = await seed_thread(unit_env)
        staff = await category_repo.save(make_category("Staff"))
        await grant(unit_env, staff, MemberGroup.GUEST, Permission.DENY_ACCESS)
        await topic_repo.save(make_topic(staff, seeded["creator"], name="Secret"))
        await topic_repo.save(
            make_topic(
                seeded["category"], seeded["creator"], name="Held", pending=True
            )
        )

        # Act
        response = await use_case.execute(LatestTopicsRequest())

        # Assert
        assert [item.topic.name for item in response.topics] == ["How do I vote"]

    @pytest.mark.asyncio
    async def test_pages_by_topics_per_page(self, unit_env):
        use_case = await unit_env.get(LatestTopicsUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        seeded = await seed_thread(unit_env)
        now = datetime.now()
        for i in range(25):
            await topic_repo.save(
                make_topic(
                    seeded["category"],
                    seeded["creator"],
                    name=f"Topic {i}",
                    created_at=now - timedelta(minutes=i),
                )
            )

        response = await use_case.execute(LatestTopicsRequest(page=2))

        assert response.total_count == 26
        assert response.total_pages == 2
        assert len(response.topics) == 6


class TestCreateTopicButton:
    """Tests for the new topic button."""

    @pytest.mark.asyncio
    async def test_anonymous_visitor_is_not_logged_on(self, unit_env):
        use_case = await unit_env.get(CreateTopicButtonUseCase)

        response = await use_case.execute(CreateTopicButtonRequest(category_id="abc"))

        assert not response.logged_on
        assert not response.can_create_topics
        assert response.category_id == "abc"

    @pytest.mark.asyncio
    async def test_member_with_create_permission_sees_button(self, unit_env):
        use_case = await unit_env.get(CreateTopicButtonUseCase)
        seeded = await seed_thread(unit_env)

        response = await use_case.execute(
            CreateTopicButtonRequest(member_id=str(seeded["voter"].id))
        )

        assert response.logged_on
        assert response.can_create_topics

    @pytest.mark.asyncio
    async def test_read_only_member_does_not_see_button(self, unit_env):
        use_case = await unit_env.get(CreateTopicButtonUseCase)
        seeded = await seed_thread(unit_env)
        await grant(
            unit_env, seeded["category"], MemberGroup.STANDARD, Permission.READ_ONLY
        )

        response = await use_case.execute(
            CreateTopicButtonRequest(member_id=str(seeded["voter"].id))
        )

        assert response.logged_on
        assert not response.can_create_topics


class TestTopicBreadcrumb:
    """Tests for the topic breadcrumb."""

    @pytest.mark.asyncio
    async def test_chain_runs_from_root_to_topic_category(self, unit_env):
        # Arrange
        use_case = await unit_env.get(TopicBreadcrumbUseCase)
        category_repo = await unit_env.get(CategoryRepository)
        topic_repo = await unit_env.get(TopicRepository)
        seeded = await seed_thread(unit_env)
        child = await category_repo.save(
            make_category("Voting", parent_id=seeded["category"].id)
        )
        topic = await topic_repo.save(
            make_topic(child, seeded["creator"], name="Down votes")
        )

        # Act
        response = await use_case.execute(
            TopicBreadcrumbRequest(topic_id=str(topic.id))
        )

        # Assert
        assert [c.name for c in response.categories] == ["General", "Voting"]
        assert response.topic.name == "Down votes"

    @pytest.mark.asyncio
    async def test_unknown_topic_raises_not_found(self, unit_env):
        use_case = await unit_env.get(TopicBreadcrumbUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                TopicBreadcrumbRequest(topic_id="8c6f1b7e-2a51-4f0e-9d55-0d5c1f3a9b21")
            )
