"""장소 Pydantic 요청/응답 스키마.

Place request/response schemas, including the nested category, location and
opening-hours shapes of the aggregate.
"""

from datetime import datetime, time

from pydantic import BaseModel, Field, model_validator

from greencity.models.place import DayOfWeek, PlaceStatus


# === 분류 (Category) ===

class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class CategoryResponse(BaseModel):
    id: int
    name: str


# === 위치 / 영업시간 (Location / Opening hours) ===

class LocationData(BaseModel):
    """위치 입력 스키마 (Location input)."""

    address: str | None = None
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class LocationResponse(LocationData):
    id: int
    place_id: int


class OpeningHoursData(BaseModel):
    """영업시간 입력 스키마.

    Opening hours input. The close time must be after the open time.
    """

    week_day: DayOfWeek
    open_time: time
    close_time: time

    @model_validator(mode="after")
    def _check_interval(self) -> "OpeningHoursData":
        if self.close_time <= self.open_time:
            raise ValueError("close_time must be after open_time")
        return self


class OpeningHoursResponse(BaseModel):
    id: int
    place_id: int
    week_day: DayOfWeek
    open_time: time
    close_time: time


# === 장소 (Place) ===

class PlaceCreate(BaseModel):
    """장소 생성 요청 스키마 (애그리거트 저장).

    Place creation request: the place together with its category name,
    location and opening hours.

    Attributes:
        name: 장소 이름 (Place name)
        category: 분류 (Category, looked up or created by name)
        location: 위치 (Location owned by the place)
        opening_hours: 영업시간 목록 (Opening hours owned by the place)
        status: 초기 상태 (Initial status, defaults to PROPOSED)
        author_id: 제안자 ID (Proposing user, optional)
    """

    name: str = Field(min_length=1, max_length=255)
    category: CategoryCreate
    location: LocationData
    opening_hours: list[OpeningHoursData] = []
    status: PlaceStatus = PlaceStatus.PROPOSED
    author_id: int | None = None


class PlaceStatusUpdate(BaseModel):
    status: PlaceStatus


class PlaceResponse(BaseModel):
    """장소 상세 응답 스키마 (Full place aggregate)."""

    id: int
    name: str
    status: PlaceStatus
    modified_date: datetime
    author_id: int | None = None
    category: CategoryResponse | None = None
    location: LocationResponse | None = None
    opening_hours: list[OpeningHoursResponse] = []


class AdminPlaceResponse(BaseModel):
    """관리자용 장소 요약 응답 스키마.

    Admin summary view used by the by-status listing.
    """

    id: int
    name: str
    status: PlaceStatus
    modified_date: datetime
    category: str | None = None
    location: LocationData | None = None
    opening_hours: list[OpeningHoursData] = []
