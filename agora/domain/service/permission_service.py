"""Permission domain service."""

import logfire

from agora.domain.model import Category, Member
from agora.domain.repository import CategoryRepository
from agora.domain.value import MemberGroup, Permission, PermissionSet

from .base import Service

# Admins can do everything except be shut out of a category
ADMIN_PERMISSIONS = frozenset(
    {Permission.CREATE_TOPICS, Permission.CREATE_POLLS, Permission.MODERATE}
)


class PermissionService(Service):
    """Resolves what a member group may do in a category."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    @staticmethod
    def group_for(member: Member | None) -> MemberGroup:
        """Group used for permission lookups; anonymous visitors are guests."""
        return member.group if member is not None else MemberGroup.GUEST

    async def get_permissions(
        self, category: Category, member: Member | None
    ) -> PermissionSet:
        """Resolve the permission set of the member's group in a category.

        Args:
            category: Category being accessed
            member: Acting member, None for anonymous visitors

        Returns:
            Permission set with the granted capabilities
        """
        group = self.group_for(member)
        if group == MemberGroup.ADMIN:
            return PermissionSet(granted=ADMIN_PERMISSIONS)

        rows = await self.category_repository.find_permissions(category.id, group)
        granted = frozenset(row.permission for row in rows if row.granted)
        logfire.debug(
            "Permissions resolved",
            category_id=str(category.id),
            group=group.value,
            granted=sorted(p.value for p in granted),
        )
        return PermissionSet(granted=granted)
