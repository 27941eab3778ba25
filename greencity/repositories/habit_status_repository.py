"""습관 진행 상태 레포지토리 — 복합 키 조회/삭제.

Habit Status Repository — Lookup and delete by composite keys.

Keys:
    - (habit_assign_id)
    - (user_id, habit_id)
    - (user_id, habit_id, create_date)

User, habit and create date live on the assignment, so every key is resolved
through ``habit_assigns``. Lookups return None when nothing matches; deletes
are unconditional and never fail on a missing row.
"""

from datetime import datetime

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.habit import HabitAssign, HabitStatus
from greencity.repositories.base import BaseRepository


def _assign_ids(user_id: int, habit_id: int, create_date: datetime | None = None) -> Select:
    """배정 ID 서브쿼리 (Subquery of matching assignment ids)."""
    query: Select = select(HabitAssign.id).where(
        HabitAssign.user_id == user_id,
        HabitAssign.habit_id == habit_id,
    )
    if create_date is not None:
        query = query.where(HabitAssign.create_date == create_date)
    return query


class HabitStatusRepository(BaseRepository[HabitStatus]):

    def __init__(self) -> None:
        super().__init__(HabitStatus)

    async def _first(self, db: AsyncSession, query: Select) -> HabitStatus | None:
        result = await db.execute(query.order_by(HabitStatus.id).limit(1))
        return result.scalar_one_or_none()

    async def find_by_habit_assign_id(
        self,
        db: AsyncSession,
        habit_assign_id: int,
    ) -> HabitStatus | None:
        query: Select = select(HabitStatus).where(HabitStatus.habit_assign_id == habit_assign_id)
        return await self._first(db, query)

    async def find_by_user_id_and_habit_id(
        self,
        db: AsyncSession,
        user_id: int,
        habit_id: int,
    ) -> HabitStatus | None:
        query: Select = select(HabitStatus).where(
            HabitStatus.habit_assign_id.in_(_assign_ids(user_id, habit_id))
        )
        return await self._first(db, query)

    async def find_by_user_id_and_habit_id_and_create_date(
        self,
        db: AsyncSession,
        user_id: int,
        habit_id: int,
        create_date: datetime,
    ) -> HabitStatus | None:
        query: Select = select(HabitStatus).where(
            HabitStatus.habit_assign_id.in_(_assign_ids(user_id, habit_id, create_date))
        )
        return await self._first(db, query)

    async def delete_by_habit_assign_id(self, db: AsyncSession, habit_assign_id: int) -> None:
        await db.execute(
            delete(HabitStatus)
            .where(HabitStatus.habit_assign_id == habit_assign_id)
            .execution_options(synchronize_session="fetch")
        )

    async def delete_by_user_id_and_habit_id(
        self,
        db: AsyncSession,
        user_id: int,
        habit_id: int,
    ) -> None:
        await db.execute(
            delete(HabitStatus)
            .where(HabitStatus.habit_assign_id.in_(_assign_ids(user_id, habit_id)))
            .execution_options(synchronize_session="fetch")
        )

    async def delete_by_user_id_and_habit_id_and_create_date(
        self,
        db: AsyncSession,
        user_id: int,
        habit_id: int,
        create_date: datetime,
    ) -> None:
        await db.execute(
            delete(HabitStatus)
            .where(HabitStatus.habit_assign_id.in_(_assign_ids(user_id, habit_id, create_date)))
            .execution_options(synchronize_session="fetch")
        )


habit_status_repository: HabitStatusRepository = HabitStatusRepository()
