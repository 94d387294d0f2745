"""End-to-end tests for topic endpoints."""

import pytest

from agora.domain.repository import CategoryRepository, MemberRepository
from agora.domain.value import MemberGroup, Permission
from tests.conftest import grant, make_category, make_member, seed_thread
from tests.e2e.conftest import AJAX, sign_in


async def _seed(container, **kwargs) -> dict:
    async with container() as request_container:
        return await seed_thread(request_container, **kwargs)


async def _csrf_headers(client) -> dict[str, str]:
    """Fetch an anti-forgery token; the cookie lands in the client's jar."""
    response = await client.get("/auth/csrf")
    body = response.json()
    return {body["header_name"]: body["csrf_token"]}


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_ok(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestShowTopic:
    """Tests for GET /topics/{slug}."""

    @pytest.mark.asyncio
    async def test_show_topic_returns_thread(self, client, container):
        # Arrange
        seeded = await _seed(container, replies=2)

        # Act
        response = await client.get("/topics/how-do-i-vote")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["topic"]["name"] == "How do I vote"
        assert body["starter_post"]["content"] == "What are the voting rules?"
        assert [p["content"] for p in body["posts"]] == ["Reply 1", "Reply 2"]
        assert body["total_count"] == 2
        assert body["topic"]["views"] == seeded["topic"].views + 1

    @pytest.mark.asyncio
    async def test_bots_do_not_count_views(self, client, container):
        seeded = await _seed(container)

        response = await client.get(
            "/topics/how-do-i-vote", headers={"User-Agent": "Googlebot/2.1"}
        )

        assert response.json()["topic"]["views"] == seeded["topic"].views

    @pytest.mark.asyncio
    async def test_unknown_slug_returns_404(self, client, container):
        await _seed(container)

        response = await client.get("/topics/no-such-topic")

        assert response.status_code == 404
        assert response.json()["detail"] == (
            "The page you were looking for could not be found."
        )

    @pytest.mark.asyncio
    async def test_denied_group_gets_403(self, client, container):
        seeded = await _seed(container)
        async with container() as request_container:
            await grant(
                request_container,
                seeded["category"],
                MemberGroup.GUEST,
                Permission.DENY_ACCESS,
            )

        response = await client.get("/topics/how-do-i-vote")

        assert response.status_code == 403


class TestLatestTopics:
    @pytest.mark.asyncio
    async def test_latest_lists_seeded_topic(self, client, container):
        await _seed(container)

        response = await client.get("/topics/latest")

        assert response.status_code == 200
        names = [item["topic"]["name"] for item in response.json()["topics"]]
        assert names == ["How do I vote"]


class TestCreateTopic:
    """Tests for POST /topics."""

    @pytest.mark.asyncio
    async def test_create_topic_returns_201(self, client, container):
        # Arrange
        seeded = await _seed(container)
        await sign_in(client, container, seeded["voter"])
        headers = await _csrf_headers(client)

        # Act
        response = await client.post(
            "/topics",
            json={
                "category_id": str(seeded["category"].id),
                "name": "Another question",
                "content": "Where is the FAQ?",
            },
            headers=headers,
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["pending"] is False
        assert body["message"] == "Your topic has been created."
        assert body["topic"]["slug"] == "another-question"

    @pytest.mark.asyncio
    async def test_moderated_category_returns_202(self, client, container):
        # Arrange
        async with container() as request_container:
            member_repo = await request_container.get(MemberRepository)
            category_repo = await request_container.get(CategoryRepository)
            member = await member_repo.save(make_member("alice"))
            category = await category_repo.save(
                make_category("Moderated", moderate_all_topics=True)
            )
            await grant(
                request_container,
                category,
                MemberGroup.STANDARD,
                Permission.CREATE_TOPICS,
            )
        await sign_in(client, container, member)
        headers = await _csrf_headers(client)

        # Act
        response = await client.post(
            "/topics",
            json={
                "category_id": str(category.id),
                "name": "Held back",
                "content": "Please approve me",
            },
            headers=headers,
        )

        # Assert
        assert response.status_code == 202
        assert response.json()["message"] == "Your topic is awaiting moderation."

    @pytest.mark.asyncio
    async def test_missing_csrf_token_returns_400(self, client, container):
        seeded = await _seed(container)
        await sign_in(client, container, seeded["voter"])

        response = await client.post(
            "/topics",
            json={
                "category_id": str(seeded["category"].id),
                "name": "Forged",
                "content": "Posted from another site",
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Your form has expired, please try again."
        )

    @pytest.mark.asyncio
    async def test_non_ascii_csrf_token_returns_400(self, client, container):
        seeded = await _seed(container)
        await sign_in(client, container, seeded["voter"])
        [header_name] = await _csrf_headers(client)

        response = await client.post(
            "/topics",
            json={
                "category_id": str(seeded["category"].id),
                "name": "Forged",
                "content": "Posted from another site",
            },
            headers={header_name: b"caf\xe9"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Your form has expired, please try again."
        )

    @pytest.mark.asyncio
    async def test_anonymous_create_returns_401(self, client, container):
        seeded = await _seed(container)
        headers = await _csrf_headers(client)

        response = await client.post(
            "/topics",
            json={
                "category_id": str(seeded["category"].id),
                "name": "Anonymous",
                "content": "Hello",
            },
            headers=headers,
        )

        assert response.status_code == 401


class TestMorePosts:
    @pytest.mark.asyncio
    async def test_second_page_of_replies(self, client, container):
        seeded = await _seed(container, replies=12)

        response = await client.post(
            f"/topics/{seeded['topic'].id}/posts", json={"page": 2}
        )

        assert response.status_code == 200
        assert [p["content"] for p in response.json()["posts"]] == [
            "Reply 11",
            "Reply 12",
        ]


class TestApproveTopic:
    @pytest.mark.asyncio
    async def test_standard_member_cannot_approve(self, client, container):
        seeded = await _seed(container)
        await sign_in(client, container, seeded["voter"])

        response = await client.post(
            f"/topics/{seeded['topic'].id}/approve", headers=AJAX
        )

        assert response.status_code == 403
