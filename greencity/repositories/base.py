"""공통 레포지토리 — 도메인 레포지토리가 상속하는 제네릭 베이스.

Shared repository base for the domain repositories: lookup by id, filtered
listing, existence checks, inserts and zero-based page slicing.

Repositories never commit. They flush so generated ids are available to the
caller, and the router that owns the request commits once at the end.
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """모델 하나에 묶인 제네릭 레포지토리.

    Generic repository bound to one mapped model.
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def _where(self, query: Select, filters: dict[str, Any]) -> Select:
        """``{컬럼: 값}`` 조건을 동등 비교로 붙입니다. 모델에 없는 키는 무시."""
        for column_name, value in filters.items():
            column = getattr(self.model, column_name, None)
            if column is not None:
                query = query.where(column == value)
        return query

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """기본 키로 한 행을 조회합니다 (Fetch one row by primary key)."""
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """필터에 맞는 행 전체를 조회합니다.

        Return every row matching ``filters``. ``None`` filter values are
        skipped so optional query parameters can be passed through as-is.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 동등 조건 딕셔너리 (Equality conditions by column name)
            order_by: 정렬 기준 (Ordering clause)
        """
        active = {k: v for k, v in (filters or {}).items() if v is not None}
        query: Select = self._where(select(self.model), active)
        if order_by is not None:
            query = query.order_by(order_by)
        return (await db.execute(query)).scalars().all()

    async def exists(self, db: AsyncSession, filters: dict[str, Any]) -> bool:
        query = select(self._where(select(self.model.id), filters).exists())
        return bool((await db.execute(query)).scalar())

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """행을 추가하고 flush하여 DB 기본값과 id를 채웁니다.

        Insert a row and flush so server defaults and the id are populated.
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """정렬된 쿼리에서 한 페이지를 잘라냅니다.

        Slice one page out of an already-ordered query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 정렬이 적용된 SELECT (Ordered SELECT)
            page: 0부터 시작하는 페이지 번호 (Zero-based page number)
            per_page: 페이지 크기 (Page size)

        Returns:
            tuple[Sequence[ModelType], int]: (페이지 행 목록, 전체 개수)
                                             (Rows on the page, total matching rows)
        """
        total_query: Select = select(func.count()).select_from(query.order_by(None).subquery())
        total: int = (await db.execute(total_query)).scalar() or 0

        page_query: Select = query.offset(page * per_page).limit(per_page)
        items: Sequence[ModelType] = (await db.execute(page_query)).scalars().all()
        return items, total
