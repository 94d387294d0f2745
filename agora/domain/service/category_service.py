"""Category domain service."""

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model import Category
from agora.domain.repository import CategoryRepository
from agora.domain.value import CategoryId

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def get_by_id(self, category_id: CategoryId) -> Category:
        """Get category by ID.

        Raises:
            NotFoundError: If category not found
        """
        category = await self.category_repository.find_by_id(category_id)
        if not category:
            logfire.warn("Category not found", category_id=str(category_id))
            raise NotFoundError("Category", str(category_id))
        return category

    async def get_all(self) -> list[Category]:
        return await self.category_repository.find_all()

    async def get_category_chain(self, category: Category) -> list[Category]:
        """Return the categories from the root down to ``category``.

        The result always ends with ``category`` itself. A parent cycle in
        stored data stops the walk instead of looping.
        """
        with logfire.span(
            "category_service.get_category_chain", category=category.name
        ):
            chain = [category]
            seen = {category.id}
            current = category
            while current.parent_id is not None and current.parent_id not in seen:
                parent = await self.category_repository.find_by_id(current.parent_id)
                if parent is None:
                    logfire.warn(
                        "Dangling category parent",
                        category_id=str(current.id),
                        parent_id=str(current.parent_id),
                    )
                    break
                chain.append(parent)
                seen.add(parent.id)
                current = parent
            chain.reverse()
            return chain
