"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router for
inclusion in the FastAPI application.

Included routers:
    - places: 장소 애그리거트 (Place aggregate)
    - categories: 장소 분류 (Place categories)
    - habits: 습관 카탈로그 (Habit catalog)
    - habit-statuses: 습관 진행 상태 (Habit statuses)
    - econews: 에코뉴스 댓글 (EcoNews comments)
    - storage: 이미지 업로드 (Image uploads)
"""

from fastapi import APIRouter

from greencity.api.comments import router as comments_router
from greencity.api.habits import router as habits_router
from greencity.api.habits import status_router as habit_status_router
from greencity.api.places import category_router
from greencity.api.places import router as places_router
from greencity.api.storage import router as storage_router

api_router: APIRouter = APIRouter()

api_router.include_router(places_router, prefix="/places", tags=["Places"])
api_router.include_router(category_router, prefix="/categories", tags=["Categories"])
api_router.include_router(habits_router, prefix="/habits", tags=["Habits"])
api_router.include_router(habit_status_router, prefix="/habit-statuses", tags=["Habit Statuses"])
api_router.include_router(comments_router, prefix="/econews", tags=["EcoNews Comments"])
api_router.include_router(storage_router, prefix="/storage", tags=["Storage"])
