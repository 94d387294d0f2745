"""Category entity and its permission grants."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CategoryId, MemberGroup, Permission, Slug


class Category(DomainModel):
    """Forum category.

    Categories form a tree through ``parent_id``. Topics in a category with
    ``moderate_all_topics`` start out pending.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=200)
    slug: Slug
    parent_id: Optional[CategoryId] = None
    moderate_all_topics: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


class CategoryPermission(DomainModel):
    """A permission granted (or withheld) to a member group in a category."""

    category_id: CategoryId
    group: MemberGroup
    permission: Permission
    granted: bool = True
