"""습관 레포지토리 — 습관, 번역, 언어 쿼리.

Habit Repository — Queries for habits, their translations and languages.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greencity.models.habit import Habit, HabitTranslation, Language
from greencity.repositories.base import BaseRepository


class HabitRepository(BaseRepository[Habit]):
    """습관 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the habits table.
    Translations are always loaded together with their language so that the
    service can map them without further queries.
    """

    def __init__(self) -> None:
        super().__init__(Habit)

    async def get_detail(self, db: AsyncSession, habit_id: int) -> Habit | None:
        """습관을 번역 목록과 함께 조회합니다.

        Retrieve a habit with translations (and their languages) loaded.
        """
        query: Select = (
            select(Habit)
            .options(selectinload(Habit.translations).selectinload(HabitTranslation.language))
            .where(Habit.id == habit_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_page(
        self,
        db: AsyncSession,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[Sequence[Habit], int]:
        query: Select = (
            select(Habit)
            .options(selectinload(Habit.translations).selectinload(HabitTranslation.language))
            .order_by(Habit.id)
            .execution_options(populate_existing=True)
        )
        return await self.get_paginated(db, query, page, per_page)


class HabitTranslationRepository(BaseRepository[HabitTranslation]):

    def __init__(self) -> None:
        super().__init__(HabitTranslation)

    def _by_language(self, language_code: str) -> Select:
        return (
            select(HabitTranslation)
            .join(Language, HabitTranslation.language_id == Language.id)
            .options(selectinload(HabitTranslation.language))
            .where(Language.code == language_code)
            .execution_options(populate_existing=True)
        )

    async def get_by_habit_and_language(
        self,
        db: AsyncSession,
        habit_id: int,
        language_code: str,
    ) -> HabitTranslation | None:
        """습관 + 언어 코드로 번역을 조회합니다.

        Retrieve the translation of ``habit_id`` in ``language_code``.
        """
        query: Select = self._by_language(language_code).where(HabitTranslation.habit_id == habit_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_page_by_language(
        self,
        db: AsyncSession,
        language_code: str,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[Sequence[HabitTranslation], int]:
        query: Select = self._by_language(language_code).order_by(HabitTranslation.habit_id)
        return await self.get_paginated(db, query, page, per_page)


class LanguageRepository(BaseRepository[Language]):

    def __init__(self) -> None:
        super().__init__(Language)

    async def get_by_code(self, db: AsyncSession, code: str) -> Language | None:
        result = await db.execute(select(Language).where(Language.code == code))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instances
habit_repository: HabitRepository = HabitRepository()
habit_translation_repository: HabitTranslationRepository = HabitTranslationRepository()
language_repository: LanguageRepository = LanguageRepository()
