"""영업시간 서비스.

Opening Hours Service — Persists and lists opening hours owned by a place.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import OpeningHours
from greencity.repositories.location_repository import opening_hours_repository
from greencity.repositories.place_repository import place_repository
from greencity.schemas.place import OpeningHoursData, OpeningHoursResponse
from greencity.utils.exceptions import NotFoundError


class OpeningHoursService:

    def to_response(self, hours: OpeningHours) -> OpeningHoursResponse:
        return OpeningHoursResponse(
            id=hours.id,
            place_id=hours.place_id,
            week_day=hours.week_day,
            open_time=hours.open_time,
            close_time=hours.close_time,
        )

    async def save(self, db: AsyncSession, place_id: int, data: OpeningHoursData) -> OpeningHours:
        return await opening_hours_repository.create(
            db,
            {
                "week_day": data.week_day,
                "open_time": data.open_time,
                "close_time": data.close_time,
                "place_id": place_id,
            },
        )

    async def find_by_place(self, db: AsyncSession, place_id: int) -> Sequence[OpeningHours]:
        """장소의 영업시간 목록 (저장 순). 장소가 없으면 404."""
        if not await place_repository.exists(db, {"id": place_id}):
            raise NotFoundError(f"Place not found by id: {place_id}")
        return await opening_hours_repository.get_by_place(db, place_id)


opening_hours_service: OpeningHoursService = OpeningHoursService()
