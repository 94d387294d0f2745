"""Unit tests for ShowTopicUseCase."""

import pytest

from agora.application.usecase.topic import ShowTopicRequest, ShowTopicUseCase
from agora.application.usecase.topic.show_topic import is_bot
from agora.domain.error import AccessDeniedError, NotFoundError
from agora.domain.repository import TopicRepository, UnitOfWork
from agora.domain.service import PollService, VoteService
from agora.domain.value import MemberGroup, Permission, PostOrderBy, VoteDirection
from tests.conftest import grant, seed_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestShowTopicUseCase:
    """Tests for the show topic flow."""

    @pytest.mark.asyncio
    async def test_shows_starter_and_replies_to_anonymous_visitor(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ShowTopicUseCase)
        seeded = await seed_thread(unit_env, replies=3)

        # Act
        response = await use_case.execute(ShowTopicRequest(slug="how-do-i-vote"))

        # Assert
        assert response.topic.topic_id == str(seeded["topic"].id)
        assert response.starter_post.post_id == str(seeded["starter"].id)
        assert [p.content for p in response.posts] == [
            "Reply 1",
            "Reply 2",
            "Reply 3",
        ]
        assert response.total_count == 3
        assert response.total_pages == 1
        assert response.order == PostOrderBy.STANDARD
        assert not response.is_subscribed
        assert not response.permissions.create_topics
        assert all(not p.allowed_to_vote for p in response.posts)

    @pytest.mark.asyncio
    async def test_unknown_slug_raises_not_found(self, unit_env):
        use_case = await unit_env.get(ShowTopicUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ShowTopicRequest(slug="missing-topic"))

    @pytest.mark.asyncio
    async def test_denied_group_raises_access_denied(self, unit_env):
        use_case = await unit_env.get(ShowTopicUseCase)
        seeded = await seed_thread(unit_env)
        await grant(
            unit_env, seeded["category"], MemberGroup.GUEST, Permission.DENY_ACCESS
        )

        with pytest.raises(AccessDeniedError):
            await use_case.execute(ShowTopicRequest(slug="how-do-i-vote"))

    @pytest.mark.asyncio
    async def test_post_views_carry_vote_state(self, unit_env):
        """Each post says whether the viewer voted and may still vote."""
        # Arrange
        use_case = await unit_env.get(ShowTopicUseCase)
        vote_service = await unit_env.get(VoteService)
        seeded = await seed_thread(unit_env, replies=2)
        first, second = seeded["replies"]
        voter = seeded["voter"]
        await vote_service.cast_vote(first.id, voter, VoteDirection.UP)

        # Act
        response = await use_case.execute(
            ShowTopicRequest(slug="how-do-i-vote", member_id=str(voter.id))
        )

        # Assert
        voted, not_voted = response.posts
        assert voted.has_voted
        assert voted.up_votes == 1
        assert voted.down_votes == 0
        assert not voted.allowed_to_vote
        assert not not_voted.has_voted
        assert not_voted.allowed_to_vote
        assert not_voted.post_id == str(second.id)

    @pytest.mark.asyncio
    async def test_views_counted_except_for_bots_and_creator(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ShowTopicUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        seeded = await seed_thread(unit_env)

        # Act
        counted = await use_case.execute(
            ShowTopicRequest(slug="how-do-i-vote", user_agent="Mozilla/5.0")
        )
        await use_case.execute(
            ShowTopicRequest(
                slug="how-do-i-vote",
                user_agent="Mozilla/5.0 (compatible; Googlebot/2.1)",
            )
        )
        await use_case.execute(
            ShowTopicRequest(
                slug="how-do-i-vote", member_id=str(seeded["creator"].id)
            )
        )

        # Assert
        assert counted.topic.views == 1
        assert (await topic_repo.find_by_id(seeded["topic"].id)).views == 1

    @pytest.mark.asyncio
    async def test_failed_view_count_is_ignored(self, unit_env):
        use_case = await unit_env.get(ShowTopicUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        await seed_thread(unit_env)

        async def failing_commit():
            raise RuntimeError("connection lost")

        unit_of_work._commit = failing_commit

        response = await use_case.execute(ShowTopicRequest(slug="how-do-i-vote"))

        assert response.topic.views == 0

    @pytest.mark.asyncio
    async def test_pending_topic_visible_to_creator_only(self, unit_env):
        use_case = await unit_env.get(ShowTopicUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        seeded = await seed_thread(unit_env)
        await topic_repo.save(seeded["topic"].model_copy(update={"pending": True}))

        response = await use_case.execute(
            ShowTopicRequest(
                slug="how-do-i-vote", member_id=str(seeded["creator"].id)
            )
        )
        assert response.topic.pending

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ShowTopicRequest(
                    slug="how-do-i-vote", member_id=str(seeded["voter"].id)
                )
            )

    @pytest.mark.asyncio
    async def test_quote_and_order_and_poll(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ShowTopicUseCase)
        poll_service = await unit_env.get(PollService)
        topic_repo = await unit_env.get(TopicRepository)
        seeded = await seed_thread(unit_env, replies=2)
        poll = await poll_service.create_poll(seeded["creator"], ["Yes", "No"])
        await topic_repo.save(seeded["topic"].model_copy(update={"poll_id": poll.id}))

        # Act
        response = await use_case.execute(
            ShowTopicRequest(
                slug="how-do-i-vote",
                order="newest",
                quote_post_id=str(seeded["replies"][0].id),
            )
        )

        # Assert
        assert response.order == PostOrderBy.NEWEST
        assert response.posts[0].content == "Reply 2"
        assert response.quoted_content == "Reply 1"
        assert response.poll.answers == {"Yes": 0, "No": 0}
        assert response.poll.total_votes == 0

    @pytest.mark.asyncio
    async def test_unknown_order_falls_back_to_standard(self, unit_env):
        use_case = await unit_env.get(ShowTopicUseCase)
        await seed_thread(unit_env)

        response = await use_case.execute(
            ShowTopicRequest(slug="how-do-i-vote", order="sideways")
        )

        assert response.order == PostOrderBy.STANDARD


class TestIsBot:
    @pytest.mark.parametrize(
        "user_agent,expected",
        [
            ("Mozilla/5.0 (compatible; bingbot/2.0)", True),
            ("facebookexternalhit/1.1", True),
            ("Mozilla/5.0 (X11; Linux x86_64) Firefox/120.0", False),
            (None, False),
        ],
    )
    def test_detects_crawlers(self, user_agent, expected):
        assert is_bot(user_agent) is expected
