"""습관 라우터 — 습관 카탈로그 및 진행 상태 엔드포인트.

Habit Router — Habit catalog and habit status endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.database import get_db
from greencity.schemas.common import PaginatedResponse
from greencity.schemas.habit import (
    HabitCreate,
    HabitResponse,
    HabitStatusResponse,
    HabitTranslationResponse,
    HabitUpdate,
)
from greencity.services.habit_service import habit_service
from greencity.services.habit_status_service import habit_status_service

router: APIRouter = APIRouter()
status_router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedResponse[HabitResponse])
async def list_habits(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: int = Query(0, ge=0),
    per_page: int = Query(20, ge=1, le=100),
) -> PaginatedResponse[HabitResponse]:
    """습관 목록 (번역 포함). Paged list of habits with translations."""
    items, total = await habit_service.get_all_habits(db, page, per_page)
    return PaginatedResponse.of(items, total, page, per_page)


@router.get("/language/{language_code}", response_model=PaginatedResponse[HabitTranslationResponse])
async def list_habits_by_language(
    language_code: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    page: int = Query(0, ge=0),
    per_page: int = Query(20, ge=1, le=100),
) -> PaginatedResponse[HabitTranslationResponse]:
    """언어별 습관 번역 목록. Paged habit translations in one language."""
    items, total = await habit_service.get_all_habits_by_language_code(
        db, language_code, page, per_page
    )
    return PaginatedResponse.of(items, total, page, per_page)


@router.get("/{habit_id}", response_model=HabitResponse)
async def get_habit(
    habit_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HabitResponse:
    return await habit_service.get_by_id(db, habit_id)


@router.get("/{habit_id}/translations/{language_code}", response_model=HabitTranslationResponse)
async def get_habit_translation(
    habit_id: int,
    language_code: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HabitTranslationResponse:
    return await habit_service.get_habit_translation(db, habit_id, language_code)


@router.post("", response_model=HabitResponse, status_code=201)
async def create_habit(
    data: HabitCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HabitResponse:
    """습관과 번역을 생성합니다.

    Create a habit with its translations. ``image`` is a file URL returned by
    the storage upload flow.
    """
    result: HabitResponse = await habit_service.save_habit_and_translations(db, data)
    await db.commit()
    return result


@router.put("/{habit_id}", response_model=HabitResponse)
async def update_habit(
    habit_id: int,
    data: HabitUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HabitResponse:
    result: HabitResponse = await habit_service.update(db, habit_id, data)
    await db.commit()
    return result


@status_router.get("/assign/{habit_assign_id}", response_model=HabitStatusResponse)
async def get_habit_status(
    habit_assign_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HabitStatusResponse:
    return await habit_status_service.find_by_habit_assign_id(db, habit_assign_id)


@status_router.delete("/users/{user_id}/habits/{habit_id}", status_code=204)
async def delete_habit_status(
    user_id: int,
    habit_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """사용자 + 습관의 진행 상태 삭제 (멱등). Idempotent delete."""
    await habit_status_service.delete_by_user_id_and_habit_id(db, user_id, habit_id)
    await db.commit()
