"""습관 진행 상태 레포지토리/API 테스트.

Habit status tests — lookups and idempotent deletes by composite keys.
"""

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.habit import Habit, HabitAssign, HabitStatus
from greencity.models.user import User
from greencity.repositories.habit_status_repository import habit_status_repository
from tests.conftest import utc

URL = "/api/v1/habit-statuses"

CREATE_DATE = utc(2020, 9, 10, 3)


@pytest_asyncio.fixture
async def statuses(db: AsyncSession, user):
    """두 사용자 × 한 습관 배정과 각 진행 상태."""
    other = User(name="Other", email="other@test.com")
    habit = Habit(image=None)
    db.add_all([other, habit])
    await db.flush()

    result = {"habit": habit, "user": user, "other": other}
    for key, owner in (("mine", user), ("theirs", other)):
        assign = HabitAssign(user_id=owner.id, habit_id=habit.id, create_date=CREATE_DATE)
        db.add(assign)
        await db.flush()
        status = HabitStatus(habit_assign_id=assign.id, working_days=3, habit_streak=2)
        db.add(status)
        await db.flush()
        result[key] = status
        result[f"{key}_assign"] = assign
    return result


class TestHabitStatusRepository:
    """복합 키 조회/삭제 테스트."""

    async def test_find_by_habit_assign_id(self, db: AsyncSession, statuses):
        found = await habit_status_repository.find_by_habit_assign_id(db, statuses["mine_assign"].id)
        assert found.id == statuses["mine"].id

    async def test_find_by_user_id_and_habit_id(self, db: AsyncSession, statuses):
        found = await habit_status_repository.find_by_user_id_and_habit_id(
            db, statuses["user"].id, statuses["habit"].id
        )
        assert found.id == statuses["mine"].id

    async def test_find_by_user_id_and_habit_id_and_create_date(self, db: AsyncSession, statuses):
        found = await habit_status_repository.find_by_user_id_and_habit_id_and_create_date(
            db, statuses["user"].id, statuses["habit"].id, CREATE_DATE
        )
        assert found.id == statuses["mine"].id

    async def test_lookup_absent_returns_none(self, db: AsyncSession, statuses):
        assert await habit_status_repository.find_by_habit_assign_id(db, 9999) is None
        assert await habit_status_repository.find_by_user_id_and_habit_id(db, 9999, statuses["habit"].id) is None
        assert await habit_status_repository.find_by_user_id_and_habit_id_and_create_date(
            db, statuses["user"].id, statuses["habit"].id, utc(2021, 1, 1)
        ) is None

    async def test_delete_by_habit_assign_id(self, db: AsyncSession, statuses):
        assign_id = statuses["mine_assign"].id
        await habit_status_repository.delete_by_habit_assign_id(db, assign_id)
        assert await habit_status_repository.find_by_habit_assign_id(db, assign_id) is None
        # 다른 사용자의 상태는 유지 — Other user's status is untouched
        assert await habit_status_repository.find_by_habit_assign_id(db, statuses["theirs_assign"].id) is not None

    async def test_delete_by_user_id_and_habit_id(self, db: AsyncSession, statuses):
        user_id, habit_id = statuses["user"].id, statuses["habit"].id
        await habit_status_repository.delete_by_user_id_and_habit_id(db, user_id, habit_id)
        assert await habit_status_repository.find_by_user_id_and_habit_id(db, user_id, habit_id) is None
        assert await habit_status_repository.find_by_user_id_and_habit_id(
            db, statuses["other"].id, habit_id
        ) is not None

    async def test_delete_by_user_id_and_habit_id_and_create_date(self, db: AsyncSession, statuses):
        user_id, habit_id = statuses["user"].id, statuses["habit"].id
        await habit_status_repository.delete_by_user_id_and_habit_id_and_create_date(
            db, user_id, habit_id, CREATE_DATE
        )
        assert await habit_status_repository.find_by_user_id_and_habit_id(db, user_id, habit_id) is None

    async def test_delete_absent_is_noop(self, db: AsyncSession, statuses):
        await habit_status_repository.delete_by_habit_assign_id(db, 9999)
        await habit_status_repository.delete_by_user_id_and_habit_id(db, 9999, 9999)
        assert await habit_status_repository.find_by_habit_assign_id(db, statuses["mine_assign"].id) is not None


class TestHabitStatusApi:

    async def test_get_by_assign(self, client: AsyncClient, statuses):
        res = await client.get(f"{URL}/assign/{statuses['mine_assign'].id}")
        assert res.status_code == 200
        assert res.json()["working_days"] == 3
        assert res.json()["habit_streak"] == 2

    async def test_get_missing(self, client: AsyncClient):
        res = await client.get(f"{URL}/assign/9999")
        assert res.status_code == 404

    async def test_delete_is_idempotent(self, client: AsyncClient, statuses):
        path = f"{URL}/users/{statuses['user'].id}/habits/{statuses['habit'].id}"
        assert (await client.delete(path)).status_code == 204
        assert (await client.delete(path)).status_code == 204
        res = await client.get(f"{URL}/assign/{statuses['mine_assign'].id}")
        assert res.status_code == 404
