"""장소 라우터 — 장소 애그리거트 및 분류 엔드포인트.

Place Router — Endpoints for the Place aggregate and categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.database import get_db
from greencity.models.place import PlaceStatus
from greencity.schemas.place import (
    AdminPlaceResponse,
    CategoryCreate,
    CategoryResponse,
    LocationResponse,
    OpeningHoursResponse,
    PlaceCreate,
    PlaceResponse,
    PlaceStatusUpdate,
)
from greencity.services.category_service import category_service
from greencity.services.location_service import location_service
from greencity.services.opening_hours_service import opening_hours_service
from greencity.services.place_service import place_service

router: APIRouter = APIRouter()
category_router: APIRouter = APIRouter()


@router.get("", response_model=list[AdminPlaceResponse])
async def list_places_by_status(
    db: Annotated[AsyncSession, Depends(get_db)],
    status: PlaceStatus = PlaceStatus.PROPOSED,
) -> list[AdminPlaceResponse]:
    """상태별 장소 목록 (최근 수정 순).

    List places with the given status, most recently modified first.
    """
    return await place_service.get_places_by_status(db, status)


@router.get("/{place_id}", response_model=PlaceResponse)
async def get_place(
    place_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PlaceResponse:
    place = await place_service.find_by_id(db, place_id)
    return place_service.to_response(place)


@router.get("/{place_id}/location", response_model=LocationResponse)
async def get_place_location(
    place_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LocationResponse:
    location = await location_service.find_by_place(db, place_id)
    return location_service.to_response(location)


@router.get("/{place_id}/opening-hours", response_model=list[OpeningHoursResponse])
async def list_place_opening_hours(
    place_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OpeningHoursResponse]:
    """장소 영업시간 목록. Opening hours of a place, in insertion order."""
    hours = await opening_hours_service.find_by_place(db, place_id)
    return [opening_hours_service.to_response(h) for h in hours]


@router.post("", response_model=PlaceResponse, status_code=201)
async def create_place(
    data: PlaceCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PlaceResponse:
    """장소를 분류/위치/영업시간과 함께 생성합니다.

    Create a place with its category, location and opening hours.
    """
    place = await place_service.save(db, data)
    result: PlaceResponse = place_service.to_response(place)
    await db.commit()
    return result


@router.patch("/{place_id}/status", response_model=PlaceResponse)
async def update_place_status(
    place_id: int,
    data: PlaceStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PlaceResponse:
    """장소 상태를 변경합니다. 같은 상태로의 변경은 400.

    Change the status of a place; re-applying the current status is a 400.
    """
    place = await place_service.update_status(db, place_id, data.status)
    result: PlaceResponse = place_service.to_response(place)
    await db.commit()
    return result


@router.delete("/{place_id}", status_code=204)
async def delete_place(
    place_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    await place_service.delete_by_id(db, place_id)
    await db.commit()


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CategoryResponse]:
    return await category_service.find_all(db)


@category_router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CategoryResponse:
    """분류를 생성합니다. 이름 중복 시 409.

    Create a category; a duplicate name is a 409.
    """
    result: CategoryResponse = await category_service.create(db, data)
    await db.commit()
    return result
