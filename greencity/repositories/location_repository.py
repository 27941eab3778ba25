"""위치 / 영업시간 레포지토리.

Location and opening-hours repositories — rows owned by a single Place.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Location, OpeningHours
from greencity.repositories.base import BaseRepository


class LocationRepository(BaseRepository[Location]):

    def __init__(self) -> None:
        super().__init__(Location)

    async def get_by_place(self, db: AsyncSession, place_id: int) -> Location | None:
        query: Select = select(Location).where(Location.place_id == place_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()


class OpeningHoursRepository(BaseRepository[OpeningHours]):

    def __init__(self) -> None:
        super().__init__(OpeningHours)

    async def get_by_place(self, db: AsyncSession, place_id: int) -> Sequence[OpeningHours]:
        query: Select = (
            select(OpeningHours)
            .where(OpeningHours.place_id == place_id)
            .order_by(OpeningHours.id)
        )
        result = await db.execute(query)
        return result.scalars().all()


location_repository: LocationRepository = LocationRepository()
opening_hours_repository: OpeningHoursRepository = OpeningHoursRepository()
