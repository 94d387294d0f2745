"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from agora.config import PointsSettings
from agora.domain.error import DuplicateVoteError, NotFoundError
from agora.domain.model import Vote
from agora.domain.repository import (
    MemberPointsRepository,
    MemberRepository,
    PostRepository,
    VoteRepository,
)
from agora.domain.service import (
    MemberPointsService,
    MemberService,
    PostService,
    VoteService,
)
from agora.domain.value import PostId, VoteDirection, VoteId
from tests.conftest import make_member, seed_thread
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _vote_service(env, settings: PointsSettings) -> VoteService:
    """Build a vote service over the test repositories with custom points."""
    member_repo = await env.get(MemberRepository)
    return VoteService(
        vote_repository=await env.get(VoteRepository),
        post_service=PostService(await env.get(PostRepository)),
        member_service=MemberService(member_repo),
        member_points_service=MemberPointsService(
            await env.get(MemberPointsRepository), member_repo
        ),
        points_settings=settings,
    )


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_up_vote_credits_author_and_counts_vote(self, unit_env):
        """A (200 points, threshold 100) up-voting B's post credits B."""
        # Arrange
        vote_service = await _vote_service(
            unit_env, PointsSettings(points_before_vote=100)
        )
        member_repo = await unit_env.get(MemberRepository)
        points_repo = await unit_env.get(MemberPointsRepository)
        post_repo = await unit_env.get(PostRepository)
        seeded = await seed_thread(unit_env, voter_points=200)
        post = seeded["replies"][0]
        author = seeded["replier"]

        # Act
        outcome = await vote_service.cast_vote(
            post.id, seeded["voter"], VoteDirection.UP
        )

        # Assert
        assert outcome.accepted
        assert outcome.count == 1
        assert outcome.delta == 2

        updated_post = await post_repo.find_by_id(post.id)
        assert updated_post.vote_count == 1

        updated_author = await member_repo.find_by_id(author.id)
        assert updated_author.points == author.points + 2

        ledger = await points_repo.find_by_member(author.id)
        assert len(ledger) == 1
        assert ledger[0].points == 2
        assert ledger[0].related_post_id == post.id

    @pytest.mark.asyncio
    async def test_down_vote_debits_author(self, unit_env):
        """Down-votes subtract the configured amount from the author."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        member_repo = await unit_env.get(MemberRepository)
        post_repo = await unit_env.get(PostRepository)
        seeded = await seed_thread(unit_env)
        post = seeded["replies"][0]

        # Act
        outcome = await vote_service.cast_vote(
            post.id, seeded["voter"], VoteDirection.DOWN
        )

        # Assert
        assert outcome.accepted
        assert outcome.count == 1
        assert outcome.delta == -1
        assert (await post_repo.find_by_id(post.id)).vote_count == -1
        author = await member_repo.find_by_id(seeded["replier"].id)
        assert author.points == seeded["replier"].points - 1

    @pytest.mark.asyncio
    async def test_down_vote_subtracts_even_with_negative_setting(self, unit_env):
        """A negative deduction setting still takes points away."""
        vote_service = await _vote_service(
            unit_env, PointsSettings(points_deducted_negative_vote=-3)
        )
        member_repo = await unit_env.get(MemberRepository)
        seeded = await seed_thread(unit_env)

        outcome = await vote_service.cast_vote(
            seeded["replies"][0].id, seeded["voter"], VoteDirection.DOWN
        )

        assert outcome.delta == -3
        author = await member_repo.find_by_id(seeded["replier"].id)
        assert author.points == seeded["replier"].points - 3

    @pytest.mark.asyncio
    async def test_self_vote_rejected_without_state_change(self, unit_env):
        """Voting on your own post changes nothing."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        points_repo = await unit_env.get(MemberPointsRepository)
        vote_repo = await unit_env.get(VoteRepository)
        member_repo = await unit_env.get(MemberRepository)
        seeded = await seed_thread(unit_env)
        post = seeded["replies"][0]
        author = await member_repo.save(
            seeded["replier"].model_copy(update={"points": 500})
        )

        # Act
        outcome = await vote_service.cast_vote(post.id, author, VoteDirection.UP)

        # Assert
        assert not outcome.accepted
        assert outcome.count == 0
        assert outcome.delta == 0
        assert await points_repo.find_by_member(author.id) == []
        assert await vote_repo.find_by_post(post.id) == []
        assert (await member_repo.find_by_id(author.id)).points == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("points", [0, 9, 10])
    async def test_voter_at_or_below_threshold_rejected(self, unit_env, points):
        """Voters need strictly more points than the threshold."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        seeded = await seed_thread(unit_env, voter_points=points)
        post = seeded["replies"][0]

        outcome = await vote_service.cast_vote(
            post.id, seeded["voter"], VoteDirection.UP
        )

        assert not outcome.accepted
        assert await vote_repo.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_rejected_vote_returns_unchanged_count(self, unit_env):
        """A rejected attempt reports the post's current net count."""
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        seeded = await seed_thread(unit_env, voter_points=0)
        post = seeded["replies"][0]
        await post_repo.adjust_vote_count(post.id, 7)

        outcome = await vote_service.cast_vote(
            post.id, seeded["voter"], VoteDirection.UP
        )

        assert not outcome.accepted
        assert outcome.count == 7

    @pytest.mark.asyncio
    async def test_second_down_vote_rejected(self, unit_env):
        """A member votes at most once per post."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        points_repo = await unit_env.get(MemberPointsRepository)
        seeded = await seed_thread(unit_env)
        post = seeded["replies"][0]
        voter = seeded["voter"]

        # Act
        first = await vote_service.cast_vote(post.id, voter, VoteDirection.DOWN)
        second = await vote_service.cast_vote(post.id, voter, VoteDirection.DOWN)

        # Assert
        assert first.accepted
        assert not second.accepted
        assert second.count == -1
        assert len(await vote_repo.find_by_post(post.id)) == 1
        assert len(await points_repo.find_by_member(seeded["replier"].id)) == 1

    @pytest.mark.asyncio
    async def test_count_is_votes_in_cast_direction(self, unit_env):
        """The returned count counts votes in the cast direction only."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        member_repo = await unit_env.get(MemberRepository)
        post_repo = await unit_env.get(PostRepository)
        seeded = await seed_thread(unit_env)
        post = seeded["replies"][0]
        others = [
            await member_repo.save(make_member(f"voter{i}", points=50))
            for i in range(3)
        ]

        # Act
        await vote_service.cast_vote(post.id, others[0], VoteDirection.UP)
        await vote_service.cast_vote(post.id, others[1], VoteDirection.UP)
        down = await vote_service.cast_vote(post.id, others[2], VoteDirection.DOWN)
        up = await vote_service.cast_vote(post.id, seeded["voter"], VoteDirection.UP)

        # Assert
        assert down.count == 1
        assert up.count == 3
        assert (await post_repo.find_by_id(post.id)).vote_count == 2

    @pytest.mark.asyncio
    async def test_vote_count_equals_signed_sum_of_votes(self, unit_env):
        """vote_count tracks the signed sum of the post's votes."""
        vote_service = await unit_env.get(VoteService)
        member_repo = await unit_env.get(MemberRepository)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        seeded = await seed_thread(unit_env)
        post = seeded["replies"][0]
        directions = [
            VoteDirection.UP,
            VoteDirection.DOWN,
            VoteDirection.DOWN,
            VoteDirection.UP,
            VoteDirection.UP,
        ]

        for i, direction in enumerate(directions):
            voter = await member_repo.save(make_member(f"v{i}", points=11))
            await vote_service.cast_vote(post.id, voter, direction)

        votes = await vote_repo.find_by_post(post.id)
        assert (await post_repo.find_by_id(post.id)).vote_count == sum(
            v.amount for v in votes
        )

    @pytest.mark.asyncio
    async def test_up_votes_never_decrease_author_points(self, unit_env):
        """Up-votes only ever add to the author's balance."""
        vote_service = await unit_env.get(VoteService)
        member_repo = await unit_env.get(MemberRepository)
        seeded = await seed_thread(unit_env, replies=3)
        before = seeded["replier"].points

        for post in seeded["replies"]:
            outcome = await vote_service.cast_vote(
                post.id, seeded["voter"], VoteDirection.UP
            )
            assert outcome.delta > 0
            after = (await member_repo.find_by_id(seeded["replier"].id)).points
            assert after >= before
            before = after

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_raises_not_found(self, unit_env):
        """Voting on an unknown post is an error, not a rejection."""
        vote_service = await unit_env.get(VoteService)
        voter = make_member("voter", points=50)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                PostId(uuid4()), voter, VoteDirection.UP
            )

    @pytest.mark.asyncio
    async def test_duplicate_insert_raises_duplicate_vote_error(self, unit_env):
        """A vote racing past the pre-check hits the unique constraint."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        seeded = await seed_thread(unit_env)
        post = seeded["replies"][0]
        voter = seeded["voter"]

        async def no_existing_vote(member_id, post_id):
            return None

        await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                post_id=post.id,
                member_id=voter.id,
                amount=1,
            )
        )
        vote_repo.find_by_member_and_post = no_existing_vote

        # Act & Assert
        with pytest.raises(DuplicateVoteError):
            await vote_service.cast_vote(post.id, voter, VoteDirection.UP)


class TestGetVotesForPosts:
    """Tests for get_votes_for_posts."""

    @pytest.mark.asyncio
    async def test_groups_votes_by_post(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        seeded = await seed_thread(unit_env, replies=2)
        first, second = seeded["replies"]
        await vote_service.cast_vote(first.id, seeded["voter"], VoteDirection.UP)

        grouped = await vote_service.get_votes_for_posts([first.id, second.id])

        assert list(grouped) == [first.id]
        assert grouped[first.id][0].member_id == seeded["voter"].id

    @pytest.mark.asyncio
    async def test_empty_input_returns_empty_mapping(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_votes_for_posts([]) == {}
