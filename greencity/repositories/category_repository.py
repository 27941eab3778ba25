"""분류 레포지토리.

Category repository — Handles categories DB queries.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Category
from greencity.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):

    def __init__(self) -> None:
        super().__init__(Category)

    async def get_by_name(self, db: AsyncSession, name: str) -> Category | None:
        query: Select = select(Category).where(Category.name == name)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all_ordered(self, db: AsyncSession) -> Sequence[Category]:
        return await self.get_all(db, order_by=Category.name)


category_repository: CategoryRepository = CategoryRepository()
