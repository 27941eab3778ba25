"""위치 서비스.

Location Service — Persists and reads the location owned by a place.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.place import Location
from greencity.repositories.location_repository import location_repository
from greencity.repositories.place_repository import place_repository
from greencity.schemas.place import LocationData, LocationResponse
from greencity.utils.exceptions import NotFoundError


class LocationService:

    def to_response(self, location: Location) -> LocationResponse:
        return LocationResponse(
            id=location.id,
            place_id=location.place_id,
            address=location.address,
            lat=location.lat,
            lng=location.lng,
        )

    async def save(self, db: AsyncSession, place_id: int, data: LocationData) -> Location:
        """장소에 귀속된 위치를 저장합니다 (Persist a location owned by ``place_id``)."""
        return await location_repository.create(
            db,
            {
                "address": data.address,
                "lat": data.lat,
                "lng": data.lng,
                "place_id": place_id,
            },
        )

    async def find_by_place(self, db: AsyncSession, place_id: int) -> Location:
        """장소의 위치를 조회합니다.

        Raises:
            NotFoundError: 장소가 없거나 위치가 없을 때 (Place or its location missing)
        """
        if not await place_repository.exists(db, {"id": place_id}):
            raise NotFoundError(f"Place not found by id: {place_id}")
        location: Location | None = await location_repository.get_by_place(db, place_id)
        if location is None:
            raise NotFoundError(f"Location not found by place id: {place_id}")
        return location


location_service: LocationService = LocationService()
