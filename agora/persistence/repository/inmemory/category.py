"""In-memory category repository for testing."""

from typing import Optional

from agora.domain.model.category import Category, CategoryPermission
from agora.domain.repository.category import CategoryRepository
from agora.domain.value import CategoryId, MemberGroup

from .database import InMemoryDatabase


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self.database.categories.get(category_id)

    async def find_all(self) -> list[Category]:
        return sorted(self.database.categories.values(), key=lambda c: c.name)

    async def save(self, category: Category) -> Category:
        self.database.categories[category.id] = category
        return category

    async def find_permissions(
        self, category_id: CategoryId, group: MemberGroup
    ) -> list[CategoryPermission]:
        return [
            p
            for p in self.database.category_permissions
            if p.category_id == category_id and p.group == group
        ]

    async def save_permission(
        self, permission: CategoryPermission
    ) -> CategoryPermission:
        self.database.category_permissions = [
            p
            for p in self.database.category_permissions
            if not (
                p.category_id == permission.category_id
                and p.group == permission.group
                and p.permission == permission.permission
            )
        ]
        self.database.category_permissions.append(permission)
        return permission
