"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from agora.domain.value.common import RootValueObject, ValueObject


class VoteDirection(str, Enum):
    """Direction of a vote on a post."""

    UP = "up"
    DOWN = "down"

    @property
    def amount(self) -> int:
        """Signed amount stored on the vote record."""
        return 1 if self is VoteDirection.UP else -1


class MemberGroup(str, Enum):
    """Member group used to resolve category permissions.

    Anonymous visitors are resolved as ``GUEST``.
    """

    GUEST = "guest"
    STANDARD = "standard"
    ADMIN = "admin"


class Permission(str, Enum):
    """Capabilities a group can be granted in a category."""

    DENY_ACCESS = "deny_access"
    READ_ONLY = "read_only"
    CREATE_TOPICS = "create_topics"
    CREATE_POLLS = "create_polls"
    MODERATE = "moderate"


class PermissionSet(ValueObject):
    """Resolved capabilities of a member group in one category."""

    granted: frozenset[Permission] = frozenset()

    def has(self, permission: Permission) -> bool:
        """Whether the permission is explicitly granted."""
        return permission in self.granted

    @property
    def denies_access(self) -> bool:
        return self.has(Permission.DENY_ACCESS)

    @property
    def is_read_only(self) -> bool:
        return self.has(Permission.READ_ONLY)

    @property
    def can_create_topics(self) -> bool:
        """Creating topics needs access, write access and the explicit grant."""
        return (
            not self.denies_access
            and not self.is_read_only
            and self.has(Permission.CREATE_TOPICS)
        )

    @property
    def can_create_polls(self) -> bool:
        return self.can_create_topics and self.has(Permission.CREATE_POLLS)

    @property
    def can_moderate(self) -> bool:
        return not self.denies_access and self.has(Permission.MODERATE)


class PostOrderBy(str, Enum):
    """Ordering of replies when showing a topic."""

    STANDARD = "standard"  # Oldest first
    NEWEST = "newest"
    VOTES = "votes"
    ALL = "all"  # Oldest first, every reply on one page

    @classmethod
    def parse(cls, value: str | None) -> "PostOrderBy":
        """Parse a query string value, falling back to STANDARD."""
        if not value:
            return cls.STANDARD
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.STANDARD


class Slug(RootValueObject[str]):
    """URL-safe slug for topics and categories.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'help-with-installation', 'welcome-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v
