"""PostgreSQL implementation of Category repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Category, CategoryPermission
from agora.domain.repository import CategoryRepository
from agora.domain.value import CategoryId, MemberGroup
from agora.persistence.mappers import (
    category_permission_to_dict,
    category_to_dict,
    row_to_category,
    row_to_category_permission,
)
from agora.persistence.tables import categories_table, category_permissions_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_all(self) -> List[Category]:
        """Find all categories ordered by name."""
        stmt = select(categories_table).order_by(categories_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        category_dict = category_to_dict(category)

        existing = await self.find_by_id(category.id)
        if existing:
            stmt = (
                update(categories_table)
                .where(categories_table.c.id == category.id)
                .values(**category_dict)
            )
        else:
            stmt = insert(categories_table).values(**category_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return category

    async def find_permissions(
        self, category_id: CategoryId, group: MemberGroup
    ) -> List[CategoryPermission]:
        """Find the permission rows of a group in a category."""
        stmt = select(category_permissions_table).where(
            and_(
                category_permissions_table.c.category_id == category_id,
                category_permissions_table.c.member_group == group.value,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_category_permission(row._asdict()) for row in result.fetchall()]

    async def save_permission(
        self, permission: CategoryPermission
    ) -> CategoryPermission:
        """Upsert a permission row."""
        values = category_permission_to_dict(permission)
        stmt = (
            pg_insert(category_permissions_table)
            .values(**values)
            .on_conflict_do_update(
                constraint="uq_category_permission",
                set_={"granted": values["granted"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return permission
