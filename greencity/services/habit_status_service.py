"""습관 진행 상태 서비스.

Habit status service — thin wrapper over the composite-key repository.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.habit import HabitStatus
from greencity.repositories.habit_status_repository import habit_status_repository
from greencity.schemas.habit import HabitStatusResponse
from greencity.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class HabitStatusService:

    def _to_response(self, habit_status: HabitStatus) -> HabitStatusResponse:
        return HabitStatusResponse(
            id=habit_status.id,
            habit_assign_id=habit_status.habit_assign_id,
            working_days=habit_status.working_days,
            habit_streak=habit_status.habit_streak,
            last_enrollment_date=habit_status.last_enrollment_date,
        )

    async def find_by_habit_assign_id(
        self,
        db: AsyncSession,
        habit_assign_id: int,
    ) -> HabitStatusResponse:
        habit_status: HabitStatus | None = await habit_status_repository.find_by_habit_assign_id(
            db, habit_assign_id
        )
        if habit_status is None:
            raise NotFoundError(f"Habit status not found by habit assign id: {habit_assign_id}")
        return self._to_response(habit_status)

    async def delete_by_user_id_and_habit_id(
        self,
        db: AsyncSession,
        user_id: int,
        habit_id: int,
    ) -> None:
        """사용자 + 습관의 진행 상태를 삭제합니다. 없으면 아무 일도 하지 않습니다.

        Delete the statuses of ``user_id``'s assignments of ``habit_id``; a no-op when none exist.
        """
        logger.info("Deleting habit statuses of user id=%s, habit id=%s", user_id, habit_id)
        await habit_status_repository.delete_by_user_id_and_habit_id(db, user_id, habit_id)


habit_status_service: HabitStatusService = HabitStatusService()
