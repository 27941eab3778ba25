"""장소 서비스 — 장소 애그리거트 저장 및 상태 전이.

Place Service — Aggregate save of a place with its category, location and
opening hours, status transitions, lookup and deletion.

Status transitions:
    Any status may move to any *other* status. Re-applying the current status
    is rejected with InvalidStatusTransitionError. Every accepted change
    stamps ``modified_date`` with the current time in
    ``settings.REFERENCE_TIMEZONE``.
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Category, Place, PlaceStatus
from greencity.repositories.place_repository import place_repository
from greencity.repositories.user_repository import user_repository
from greencity.schemas.place import (
    AdminPlaceResponse,
    LocationData,
    OpeningHoursData,
    PlaceCreate,
    PlaceResponse,
)
from greencity.services.category_service import category_service
from greencity.services.location_service import location_service
from greencity.services.opening_hours_service import opening_hours_service
from greencity.utils.exceptions import InvalidStatusTransitionError, NotFoundError
from greencity.utils.time import now_in_zone

logger = logging.getLogger(__name__)


class PlaceService:
    """장소 관련 비즈니스 로직을 처리하는 서비스.

    Service handling place business logic. Methods return ORM instances with
    the whole aggregate loaded; ``to_response`` / ``to_admin_response`` map
    them to API schemas.
    """

    def to_response(self, place: Place) -> PlaceResponse:
        """장소 모델을 상세 응답 스키마로 변환합니다.

        Convert a fully loaded Place to a PlaceResponse.
        """
        return PlaceResponse(
            id=place.id,
            name=place.name,
            status=place.status,
            modified_date=place.modified_date,
            author_id=place.author_id,
            category=category_service.to_response(place.category) if place.category is not None else None,
            location=location_service.to_response(place.location) if place.location is not None else None,
            opening_hours=[opening_hours_service.to_response(h) for h in place.opening_hours],
        )

    def to_admin_response(self, place: Place) -> AdminPlaceResponse:
        return AdminPlaceResponse(
            id=place.id,
            name=place.name,
            status=place.status,
            modified_date=place.modified_date,
            category=place.category.name if place.category is not None else None,
            location=(
                LocationData(
                    address=place.location.address,
                    lat=place.location.lat,
                    lng=place.location.lng,
                )
                if place.location is not None
                else None
            ),
            opening_hours=[
                OpeningHoursData(week_day=h.week_day, open_time=h.open_time, close_time=h.close_time)
                for h in place.opening_hours
            ],
        )

    async def save(self, db: AsyncSession, data: PlaceCreate) -> Place:
        """장소 애그리거트를 저장합니다.

        Save a place together with its category, location and opening hours.

        Steps (one savepoint, all-or-nothing):
            1. 분류 조회 또는 생성 (Look the category up by name, create if absent)
            2. 장소 저장 후 분류 연결 (Persist the place, then attach the category)
            3. 위치 저장 (Persist the location owned by the place)
            4. 영업시간을 하나씩 저장 (Persist each opening hours row individually)

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 장소 생성 데이터 (Place creation data)

        Returns:
            Place: 하위 엔티티가 모두 로드된 장소 (Place with the aggregate loaded)

        Raises:
            NotFoundError: 제안자 ID가 존재하지 않을 때 (Unknown author id)
        """
        logger.info("Saving place %r (category=%r)", data.name, data.category.name)

        if data.author_id is not None and not await user_repository.exists(db, {"id": data.author_id}):
            raise NotFoundError(f"User not found by id: {data.author_id}")

        async with db.begin_nested():
            category: Category = await category_service.get_or_create(db, data.category.name)

            place: Place = await place_repository.create(
                db,
                {
                    "name": data.name,
                    "status": data.status,
                    "modified_date": now_in_zone(),
                    "author_id": data.author_id,
                },
            )
            place.category_id = category.id
            await db.flush()

            await location_service.save(db, place.id, data.location)
            for hours in data.opening_hours:
                await opening_hours_service.save(db, place.id, hours)

        logger.info("Saved place id=%s with %d opening hours", place.id, len(data.opening_hours))
        return await self.find_by_id(db, place.id)

    async def find_by_id(self, db: AsyncSession, place_id: int) -> Place:
        """ID로 장소를 조회합니다.

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
        """
        logger.info("Finding place by id=%s", place_id)
        place: Place | None = await place_repository.get_detail(db, place_id)
        if place is None:
            raise NotFoundError(f"Place not found by id: {place_id}")
        return place

    async def find_all(self, db: AsyncSession) -> Sequence[Place]:
        return await place_repository.get_all_detailed(db)

    async def get_places_by_status(
        self,
        db: AsyncSession,
        status: PlaceStatus,
    ) -> list[AdminPlaceResponse]:
        """상태별 장소 요약 목록 (최근 수정 순).

        List places with ``status`` as admin summaries, most recently modified first.
        """
        places: Sequence[Place] = await place_repository.get_by_status_ordered(db, status)
        return [self.to_admin_response(p) for p in places]

    async def update_status(
        self,
        db: AsyncSession,
        place_id: int,
        status: PlaceStatus,
    ) -> Place:
        """장소 상태를 변경하고 수정 시각을 기록합니다.

        Change the status of a place and stamp the modification time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            place_id: 장소 ID (Place id)
            status: 새 상태 (Target status)

        Returns:
            Place: 변경된 장소 (Updated place)

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
            InvalidStatusTransitionError: 현재 상태와 같을 때 (Status unchanged)
        """
        logger.info("Updating status of place id=%s to %s", place_id, status.value)
        place: Place = await self.find_by_id(db, place_id)

        if place.status == status:
            logger.error("Status of place id=%s is already %s", place_id, status.value)
            raise InvalidStatusTransitionError(
                f"Place status is not different, place id: {place_id}, status: {place.status.value}"
            )

        place.status = status
        place.modified_date = now_in_zone()
        await db.flush()
        return place

    async def delete_by_id(self, db: AsyncSession, place_id: int) -> bool:
        """장소를 삭제합니다. 위치/영업시간은 함께 삭제됩니다.

        Delete a place; its location and opening hours go with it.

        Raises:
            NotFoundError: 장소를 찾을 수 없을 때 (Place not found)
        """
        place: Place = await self.find_by_id(db, place_id)
        await db.delete(place)
        await db.flush()
        logger.info("Deleted place id=%s", place_id)
        return True


# 싱글턴 인스턴스 — Singleton instance
place_service: PlaceService = PlaceService()
