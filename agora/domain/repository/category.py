"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.category import Category, CategoryPermission
from agora.domain.value import CategoryId, MemberGroup


class CategoryRepository(ABC):
    """Repository for categories and their permission grants."""

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        pass

    @abstractmethod
    async def find_permissions(
        self, category_id: CategoryId, group: MemberGroup
    ) -> list[CategoryPermission]:
        """Find the permission grants of a group in a category.

        Args:
            category_id: Category ID
            group: Member group

        Returns:
            Permission rows (granted or withheld)
        """
        pass

    @abstractmethod
    async def save_permission(
        self, permission: CategoryPermission
    ) -> CategoryPermission:
        """Save a permission grant, replacing any row for the same
        category, group and permission."""
        pass
