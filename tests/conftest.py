"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from agora.domain.model import Category, CategoryPermission, Member, Post, Topic
from agora.domain.repository import (
    CategoryRepository,
    MemberRepository,
    PostRepository,
    TopicRepository,
)
from agora.domain.value import (
    CategoryId,
    MemberGroup,
    MemberId,
    Permission,
    PostId,
    Slug,
    TopicId,
)

# Permissions a normal forum grants members in an open category
MEMBER_PERMISSIONS = (Permission.CREATE_TOPICS, Permission.CREATE_POLLS)


def make_member(username: str = "member", points: int = 0, **overrides) -> Member:
    """Build a member with a fresh ID."""
    return Member(
        id=MemberId(uuid4()),
        username=username,
        email=overrides.pop("email", f"{username}@example.com"),
        points=points,
        **overrides,
    )


def make_category(name: str = "General", **overrides) -> Category:
    """Build a category whose slug is derived from its name."""
    return Category(
        id=CategoryId(uuid4()),
        name=name,
        slug=overrides.pop("slug", Slug(name.lower().replace(" ", "-"))),
        **overrides,
    )


def make_topic(
    category: Category, member: Member, name: str = "Test topic", **overrides
) -> Topic:
    """Build a topic in ``category`` started by ``member``."""
    return Topic(
        id=TopicId(uuid4()),
        name=name,
        slug=overrides.pop("slug", Slug(name.lower().replace(" ", "-"))),
        category_id=category.id,
        member_id=member.id,
        **overrides,
    )


def make_post(
    topic: Topic, member: Member, content: str = "A reply", **overrides
) -> Post:
    """Build a post in ``topic`` written by ``member``."""
    return Post(
        id=PostId(uuid4()),
        topic_id=topic.id,
        member_id=member.id,
        content=content,
        **overrides,
    )


async def grant(
    container,
    category: Category,
    group: MemberGroup,
    *permissions: Permission,
) -> None:
    """Grant ``permissions`` to ``group`` in ``category``."""
    category_repo = await container.get(CategoryRepository)
    for permission in permissions:
        await category_repo.save_permission(
            CategoryPermission(
                category_id=category.id, group=group, permission=permission
            )
        )


async def seed_thread(container, replies: int = 1, voter_points: int = 50) -> dict:
    """Seed an open category with one topic, its starter post and replies.

    The topic is started by ``creator``; every reply is written by
    ``replier``; ``voter`` has enough points to vote.

    Returns:
        The seeded entities by role
    """
    member_repo = await container.get(MemberRepository)
    category_repo = await container.get(CategoryRepository)
    topic_repo = await container.get(TopicRepository)
    post_repo = await container.get(PostRepository)

    creator = await member_repo.save(make_member("creator", points=20))
    replier = await member_repo.save(make_member("replier", points=20))
    voter = await member_repo.save(make_member("voter", points=voter_points))

    category = await category_repo.save(make_category("General"))
    await grant(container, category, MemberGroup.STANDARD, *MEMBER_PERMISSIONS)

    started = datetime.now() - timedelta(hours=1)
    topic = await topic_repo.save(
        make_topic(category, creator, name="How do I vote", created_at=started)
    )
    starter = await post_repo.save(
        make_post(
            topic,
            creator,
            content="What are the voting rules?",
            is_topic_starter=True,
            created_at=started,
        )
    )
    posts = []
    for i in range(replies):
        posts.append(
            await post_repo.save(
                make_post(
                    topic,
                    replier,
                    content=f"Reply {i + 1}",
                    created_at=started + timedelta(minutes=i + 1),
                )
            )
        )

    return {
        "creator": creator,
        "replier": replier,
        "voter": voter,
        "category": category,
        "topic": topic,
        "starter": starter,
        "replies": posts,
    }
