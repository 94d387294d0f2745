"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from agora.domain.model import (
    Category,
    CategoryPermission,
    Email,
    Member,
    MemberPoints,
    Poll,
    PollAnswer,
    PollVote,
    Post,
    Topic,
    TopicSubscription,
    Vote,
)
from agora.domain.value import (
    CategoryId,
    EmailId,
    MemberGroup,
    MemberId,
    MemberPointsId,
    Permission,
    PollAnswerId,
    PollId,
    PollVoteId,
    PostId,
    Slug,
    SubscriptionId,
    TopicId,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_member(row: Dict[str, Any]) -> Member:
    """Convert database row to Member domain model.

    Args:
        row: Database row as dict

    Returns:
        Member domain model
    """
    return Member(
        id=MemberId(_uuid(row["id"])),
        username=row["username"],
        email=row.get("email"),
        group=MemberGroup(row["member_group"]),
        points=row["points"],
        post_count=row["post_count"],
        is_locked_out=row["is_locked_out"],
        is_approved=row["is_approved"],
        disable_posting=row["disable_posting"],
        disable_email_notifications=row["disable_email_notifications"],
        created_at=row["created_at"],
    )


def member_to_dict(member: Member) -> Dict[str, Any]:
    """Convert Member domain model to database dict.

    Args:
        member: Member domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = member.model_dump()
    data["member_group"] = data.pop("group").value
    return data


def row_to_member_points(row: Dict[str, Any]) -> MemberPoints:
    return MemberPoints(
        id=MemberPointsId(_uuid(row["id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        points=row["points"],
        related_post_id=_optional_uuid(row.get("related_post_id")),
        created_at=row["created_at"],
    )


def member_points_to_dict(entry: MemberPoints) -> Dict[str, Any]:
    return entry.model_dump()


def row_to_category(row: Dict[str, Any]) -> Category:
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        parent_id=_optional_uuid(row.get("parent_id")),
        moderate_all_topics=row["moderate_all_topics"],
        created_at=row["created_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    data = category.model_dump()
    data["slug"] = str(category.slug)
    return data


def row_to_category_permission(row: Dict[str, Any]) -> CategoryPermission:
    return CategoryPermission(
        category_id=CategoryId(_uuid(row["category_id"])),
        group=MemberGroup(row["member_group"]),
        permission=Permission(row["permission"]),
        granted=row["granted"],
    )


def category_permission_to_dict(permission: CategoryPermission) -> Dict[str, Any]:
    return {
        "category_id": permission.category_id,
        "member_group": permission.group.value,
        "permission": permission.permission.value,
        "granted": permission.granted,
    }


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model.

    Args:
        row: Database row as dict

    Returns:
        Topic domain model
    """
    return Topic(
        id=TopicId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        category_id=CategoryId(_uuid(row["category_id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        views=row["views"],
        solved=row["solved"],
        pending=row["pending"],
        poll_id=_optional_uuid(row.get("poll_id")),
        last_post_id=_optional_uuid(row.get("last_post_id")),
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict.

    Args:
        topic: Topic domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = topic.model_dump()
    data["slug"] = str(topic.slug)
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        content=row["content"],
        vote_count=row["vote_count"],
        is_solution=row["is_solution"],
        is_topic_starter=row["is_topic_starter"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    return post.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        amount=row["amount"],
        voted_at=row["voted_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    return vote.model_dump()


def row_to_poll(row: Dict[str, Any]) -> Poll:
    return Poll(
        id=PollId(_uuid(row["id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        created_at=row["created_at"],
    )


def row_to_poll_answer(row: Dict[str, Any]) -> PollAnswer:
    return PollAnswer(
        id=PollAnswerId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        answer=row["answer"],
    )


def row_to_poll_vote(row: Dict[str, Any]) -> PollVote:
    return PollVote(
        id=PollVoteId(_uuid(row["id"])),
        answer_id=PollAnswerId(_uuid(row["answer_id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        voted_at=row["voted_at"],
    )


def row_to_topic_subscription(row: Dict[str, Any]) -> TopicSubscription:
    return TopicSubscription(
        id=SubscriptionId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        created_at=row["created_at"],
    )


def row_to_email(row: Dict[str, Any]) -> Email:
    return Email(
        id=EmailId(_uuid(row["id"])),
        email_to=row["email_to"],
        name_to=row["name_to"],
        email_from=row["email_from"],
        subject=row["subject"],
        body=row["body"],
        created_at=row["created_at"],
    )
