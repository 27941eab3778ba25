"""습관 서비스 — 습관 카탈로그 조회/생성/수정.

Habit Service — Catalog lookups, translation lookups, create and update.
Images are referenced by URL only. A temp upload is moved to its final key
through the storage service after the habit rows are flushed.
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.habit import Habit, HabitTranslation, Language
from greencity.repositories.habit_repository import (
    habit_repository,
    habit_translation_repository,
    language_repository,
)
from greencity.schemas.habit import (
    HabitCreate,
    HabitResponse,
    HabitTranslationData,
    HabitTranslationResponse,
    HabitUpdate,
)
from greencity.services.storage_service import storage_service
from greencity.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class HabitService:
    """습관 관련 비즈니스 로직을 처리하는 서비스.

    Service handling habit catalog business logic.
    """

    def _translation_response(self, translation: HabitTranslation) -> HabitTranslationResponse:
        return HabitTranslationResponse(
            id=translation.id,
            habit_id=translation.habit_id,
            name=translation.name,
            description=translation.description,
            habit_item=translation.habit_item,
            language_code=translation.language.code,
        )

    def _to_response(self, habit: Habit) -> HabitResponse:
        return HabitResponse(
            id=habit.id,
            image=habit.image,
            translations=[self._translation_response(t) for t in habit.translations],
        )

    async def _resolve_languages(
        self,
        db: AsyncSession,
        translations: list[HabitTranslationData],
    ) -> dict[str, Language]:
        """번역의 언어 코드를 언어 엔티티로 변환합니다.

        Map every language code used by ``translations`` to its Language row.

        Raises:
            BadRequestError: 같은 언어 코드가 두 번 이상 있을 때 (Duplicate language code)
            NotFoundError: 알 수 없는 언어 코드일 때 (Unknown language code)
        """
        codes: list[str] = [t.language_code for t in translations]
        if len(codes) != len(set(codes)):
            raise BadRequestError("Each language may appear only once in translations")

        languages: dict[str, Language] = {}
        for code in codes:
            language: Language | None = await language_repository.get_by_code(db, code)
            if language is None:
                raise NotFoundError(f"Language not found by code: {code}")
            languages[code] = language
        return languages

    async def _attach_image(self, db: AsyncSession, habit: Habit, image: str | None) -> None:
        """업로드 이미지를 최종 위치로 옮기고 습관에 연결합니다.

        Runs after every other row of the call is flushed, so a failed insert
        never leaves the client's temp upload moved away. ``None`` keeps the
        current image.
        """
        if image is None:
            return
        habit.image = storage_service.finalize_upload(image)
        await db.flush()

    async def get_by_id(self, db: AsyncSession, habit_id: int) -> HabitResponse:
        """ID로 습관을 조회합니다.

        Raises:
            NotFoundError: 습관을 찾을 수 없을 때 (Habit not found)
        """
        habit: Habit | None = await habit_repository.get_detail(db, habit_id)
        if habit is None:
            raise NotFoundError(f"Habit not found by id: {habit_id}")
        return self._to_response(habit)

    async def get_all_habits(
        self,
        db: AsyncSession,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[list[HabitResponse], int]:
        habits, total = await habit_repository.get_page(db, page, per_page)
        return [self._to_response(h) for h in habits], total

    async def get_all_habits_by_language_code(
        self,
        db: AsyncSession,
        language_code: str,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[list[HabitTranslationResponse], int]:
        """언어별 습관 번역 목록을 페이지 조회합니다.

        Page through the habit translations written in ``language_code``.
        """
        translations, total = await habit_translation_repository.get_page_by_language(
            db, language_code, page, per_page
        )
        return [self._translation_response(t) for t in translations], total

    async def get_habit_translation(
        self,
        db: AsyncSession,
        habit_id: int,
        language_code: str,
    ) -> HabitTranslationResponse:
        """습관 + 언어 코드로 번역을 조회합니다.

        Raises:
            NotFoundError: 번역이 없을 때 (No translation for the pair)
        """
        translation: HabitTranslation | None = (
            await habit_translation_repository.get_by_habit_and_language(db, habit_id, language_code)
        )
        if translation is None:
            raise NotFoundError(
                f"Habit translation not found for habit id: {habit_id}, language: {language_code}"
            )
        return self._translation_response(translation)

    async def save_habit_and_translations(
        self,
        db: AsyncSession,
        data: HabitCreate,
    ) -> HabitResponse:
        """습관과 번역 목록을 저장합니다.

        Save a habit with its translations. A temp image upload is moved to
        its final key once the rows are flushed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 습관 생성 데이터 (Habit creation data)

        Returns:
            HabitResponse: 생성된 습관 (Created habit with translations)
        """
        languages: dict[str, Language] = await self._resolve_languages(db, data.translations)
        habit: Habit = await habit_repository.create(db, {"image": data.image})
        for translation in data.translations:
            await habit_translation_repository.create(
                db,
                {
                    "habit_id": habit.id,
                    "language_id": languages[translation.language_code].id,
                    "name": translation.name,
                    "description": translation.description,
                    "habit_item": translation.habit_item,
                },
            )

        await self._attach_image(db, habit, data.image)
        logger.info("Saved habit id=%s with %d translations", habit.id, len(data.translations))
        return await self.get_by_id(db, habit.id)

    async def update(
        self,
        db: AsyncSession,
        habit_id: int,
        data: HabitUpdate,
    ) -> HabitResponse:
        """습관을 덮어쓰기 방식으로 수정합니다.

        Overwrite a habit in place. Translations for languages already present
        are replaced; other languages are added.

        Raises:
            NotFoundError: 습관 또는 언어를 찾을 수 없을 때 (Habit or language not found)
        """
        logger.info("Updating habit id=%s", habit_id)
        habit: Habit | None = await habit_repository.get_by_id(db, habit_id)
        if habit is None:
            raise NotFoundError(f"Habit not found by id: {habit_id}")

        languages: dict[str, Language] = await self._resolve_languages(db, data.translations)

        existing: Sequence[HabitTranslation] = await habit_translation_repository.get_all(
            db, filters={"habit_id": habit_id}
        )
        by_language: dict[int, HabitTranslation] = {t.language_id: t for t in existing}

        for translation in data.translations:
            language: Language = languages[translation.language_code]
            values = {
                "name": translation.name,
                "description": translation.description,
                "habit_item": translation.habit_item,
            }
            current: HabitTranslation | None = by_language.get(language.id)
            if current is None:
                await habit_translation_repository.create(
                    db, {**values, "habit_id": habit_id, "language_id": language.id}
                )
            else:
                for field, value in values.items():
                    setattr(current, field, value)

        await db.flush()
        await self._attach_image(db, habit, data.image)
        return await self.get_by_id(db, habit_id)


# 싱글턴 인스턴스 — Singleton instance
habit_service: HabitService = HabitService()
