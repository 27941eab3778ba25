"""분류 서비스 — 이름 기준 조회/생성.

Category Service — Lookup and creation of categories by name.
"""

import logging
from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Category
from greencity.repositories.category_repository import category_repository
from greencity.schemas.place import CategoryCreate, CategoryResponse
from greencity.utils.exceptions import DuplicateError

logger = logging.getLogger(__name__)


class CategoryService:
    """분류 관련 비즈니스 로직을 처리하는 서비스.

    Service handling category business logic.
    """

    def to_response(self, category: Category) -> CategoryResponse:
        return CategoryResponse(id=category.id, name=category.name)

    async def find_by_name(self, db: AsyncSession, name: str) -> Category | None:
        return await category_repository.get_by_name(db, name)

    async def get_or_create(self, db: AsyncSession, name: str) -> Category:
        """이름으로 분류를 조회하고 없으면 생성합니다.

        Look a category up by exact name and create it when absent.
        The insert runs in its own savepoint; a unique violation means another
        transaction inserted the same name first, so the row is fetched again
        instead of failing.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 분류 이름 (Category name)

        Returns:
            Category: 기존 또는 새로 생성된 분류 (Existing or newly created category)
        """
        category: Category | None = await self.find_by_name(db, name)
        if category is not None:
            return category

        try:
            async with db.begin_nested():
                category = await category_repository.create(db, {"name": name})
            logger.info("Created category %r (id=%s)", name, category.id)
            return category
        except IntegrityError:
            logger.info("Category %r was inserted concurrently, fetching existing row", name)
            category = await self.find_by_name(db, name)
            if category is None:
                raise
            return category

    async def create(self, db: AsyncSession, data: CategoryCreate) -> CategoryResponse:
        """분류를 명시적으로 생성합니다.

        Create a category explicitly.

        Raises:
            DuplicateError: 같은 이름의 분류가 이미 존재할 때
                            (When a category with the same name already exists)
        """
        if await self.find_by_name(db, data.name) is not None:
            raise DuplicateError(f"Category already exists: {data.name}")

        try:
            async with db.begin_nested():
                category: Category = await category_repository.create(db, {"name": data.name})
        except IntegrityError as exc:
            logger.info("Category %r was inserted concurrently", data.name)
            raise DuplicateError(f"Category already exists: {data.name}") from exc
        logger.info("Created category %r (id=%s)", category.name, category.id)
        return self.to_response(category)

    async def find_all(self, db: AsyncSession) -> list[CategoryResponse]:
        categories: Sequence[Category] = await category_repository.get_all_ordered(db)
        return [self.to_response(c) for c in categories]


# 싱글턴 인스턴스 — Singleton instance
category_service: CategoryService = CategoryService()
