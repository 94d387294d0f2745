"""Response models shared by the topic use cases."""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from agora.domain.model import Category, Member, Post, Topic
from agora.domain.service import MemberService, VoteService
from agora.domain.value import MemberId, PermissionSet


class TopicView(BaseModel):
    """Topic as returned to clients."""

    topic_id: str
    name: str
    slug: str
    category_id: str
    member_id: str
    views: int
    solved: bool
    pending: bool
    has_poll: bool
    created_at: datetime

    @classmethod
    def from_topic(cls, topic: Topic) -> "TopicView":
        return cls(
            topic_id=str(topic.id),
            name=topic.name,
            slug=str(topic.slug),
            category_id=str(topic.category_id),
            member_id=str(topic.member_id),
            views=topic.views,
            solved=topic.solved,
            pending=topic.pending,
            has_poll=topic.poll_id is not None,
            created_at=topic.created_at,
        )


class CategoryView(BaseModel):
    category_id: str
    name: str
    slug: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryView":
        return cls(
            category_id=str(category.id),
            name=category.name,
            slug=str(category.slug),
        )


class PermissionView(BaseModel):
    """The viewer's capabilities in a category."""

    deny_access: bool
    read_only: bool
    create_topics: bool
    create_polls: bool
    moderate: bool

    @classmethod
    def from_permissions(cls, permissions: PermissionSet) -> "PermissionView":
        return cls(
            deny_access=permissions.denies_access,
            read_only=permissions.is_read_only,
            create_topics=permissions.can_create_topics,
            create_polls=permissions.can_create_polls,
            moderate=permissions.can_moderate,
        )


class PostView(BaseModel):
    """Post as returned to clients, with the viewer's vote state."""

    post_id: str
    topic_id: str
    member_id: str
    author_username: str | None
    content: str
    vote_count: int
    up_votes: int
    down_votes: int
    is_solution: bool
    is_topic_starter: bool
    created_at: datetime
    has_voted: bool
    allowed_to_vote: bool


async def build_post_views(
    posts: Sequence[Post],
    viewer: Member | None,
    vote_service: VoteService,
    member_service: MemberService,
) -> list[PostView]:
    """Build post views with vote counts and the viewer's voting state.

    Votes and authors are loaded in one batch each.

    Args:
        posts: Posts to render
        viewer: Current member, None for anonymous visitors
        vote_service: Vote domain service
        member_service: Member domain service

    Returns:
        One view per post, in the order given
    """
    if not posts:
        return []

    votes_by_post = await vote_service.get_votes_for_posts([p.id for p in posts])
    author_ids = list({p.member_id for p in posts})
    authors: dict[MemberId, Member] = {
        m.id: m for m in await member_service.get_many(author_ids)
    }

    views = []
    for post in posts:
        votes = votes_by_post.get(post.id, [])
        has_voted = viewer is not None and any(v.member_id == viewer.id for v in votes)
        allowed_to_vote = (
            viewer is not None
            and viewer.has_access
            and not has_voted
            and vote_service.is_eligible(post, viewer)
        )
        author = authors.get(post.member_id)
        views.append(
            PostView(
                post_id=str(post.id),
                topic_id=str(post.topic_id),
                member_id=str(post.member_id),
                author_username=author.username if author else None,
                content=post.content,
                vote_count=post.vote_count,
                up_votes=sum(1 for v in votes if v.is_positive),
                down_votes=sum(1 for v in votes if not v.is_positive),
                is_solution=post.is_solution,
                is_topic_starter=post.is_topic_starter,
                created_at=post.created_at,
                has_voted=has_voted,
                allowed_to_vote=allowed_to_vote,
            )
        )
    return views
