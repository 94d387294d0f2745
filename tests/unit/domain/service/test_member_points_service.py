"""Unit tests for MemberPointsService."""

import pytest

from agora.domain.repository import MemberRepository
from agora.domain.service import MemberPointsService
from tests.conftest import make_member
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddPoints:
    """Tests for the points ledger."""

    @pytest.mark.asyncio
    async def test_balance_equals_sum_of_ledger(self, unit_env):
        """Every balance change is recorded as a ledger entry."""
        points_service = await unit_env.get(MemberPointsService)
        member_repo = await unit_env.get(MemberRepository)
        member = await member_repo.save(make_member("bob"))

        for delta in (2, -1, 4, 1):
            await points_service.add(member.id, delta)

        ledger = await points_service.get_ledger(member.id)
        balance = (await member_repo.find_by_id(member.id)).points
        assert balance == sum(entry.points for entry in ledger) == 6

    @pytest.mark.asyncio
    async def test_ledger_entries_keep_related_post(self, unit_env):
        points_service = await unit_env.get(MemberPointsService)
        member_repo = await unit_env.get(MemberRepository)
        member = await member_repo.save(make_member("bob"))

        entry = await points_service.add(member.id, 1)

        assert entry.related_post_id is None
        assert entry.member_id == member.id
