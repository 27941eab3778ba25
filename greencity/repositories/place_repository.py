"""장소 레포지토리 — 장소 애그리거트 조회 쿼리.

Place Repository — Queries for the Place aggregate.
Detail queries eagerly load category, location and opening hours so that
callers never trigger lazy loads on the async session.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greencity.models.place import Place, PlaceStatus
from greencity.repositories.base import BaseRepository


def _with_aggregate(query: Select) -> Select:
    """애그리거트 하위 엔티티 즉시 로딩 옵션 (Eager-load the owned and shared children)."""
    return query.options(
        selectinload(Place.category),
        selectinload(Place.location),
        selectinload(Place.opening_hours),
    ).execution_options(populate_existing=True)


class PlaceRepository(BaseRepository[Place]):
    """장소 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the places table.
    """

    def __init__(self) -> None:
        super().__init__(Place)

    async def get_detail(
        self,
        db: AsyncSession,
        place_id: int,
    ) -> Place | None:
        """장소를 분류/위치/영업시간과 함께 조회합니다.

        Retrieve a place with category, location and opening hours loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            place_id: 장소 ID (Place id)

        Returns:
            Place | None: 하위 엔티티가 로드된 장소 또는 None
        """
        query: Select = _with_aggregate(select(Place).where(Place.id == place_id))
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all_detailed(self, db: AsyncSession) -> Sequence[Place]:
        query: Select = _with_aggregate(select(Place).order_by(Place.id))
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_status_ordered(
        self,
        db: AsyncSession,
        status: PlaceStatus,
    ) -> Sequence[Place]:
        """상태별 장소 목록을 수정 시각 내림차순으로 조회합니다.

        Retrieve all places with ``status``, newest modification first.
        """
        query: Select = _with_aggregate(
            select(Place)
            .where(Place.status == status)
            .order_by(Place.modified_date.desc(), Place.id.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
place_repository: PlaceRepository = PlaceRepository()
