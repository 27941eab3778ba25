"""장소 관련 SQLAlchemy ORM 모델 정의.

Place-related SQLAlchemy ORM model definitions.
A Place is an aggregate root: it owns exactly one Location and any number of
OpeningHours rows, and references a shared Category by id.

Tables:
    - categories: 장소 분류 (Shared, unique by name)
    - places: 장소 (Aggregate root)
    - locations: 장소 위치 (Owned by a place, one-to-one)
    - opening_hours: 영업 시간 (Owned by a place, one-to-many)
"""

import enum
from datetime import datetime, time

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greencity.database import Base


class PlaceStatus(str, enum.Enum):
    """장소 승인 상태 (Place moderation status)."""

    PROPOSED = "PROPOSED"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    DELETED = "DELETED"


class DayOfWeek(str, enum.Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class Category(Base):
    """장소 분류 모델 — 여러 장소가 공유.

    Category model shared across places. The name column is unique so that
    concurrent lookup-or-create calls can never produce two rows per name.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 분류 이름 — Unique category name
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class Place(Base):
    """장소 모델 — 애그리거트 루트.

    Place model, the root of the Place aggregate.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 장소 이름 (Place name)
        status: 승인 상태 (Moderation status)
        modified_date: 생성/상태 변경 시각 (Set on creation and on each status change)
        category_id: 분류 FK (Shared category)
        author_id: 제안한 사용자 FK (Proposing user, optional)

    Relationships:
        category: 분류 (Many-to-one)
        location: 위치 (One-to-one, owned, cascade delete)
        opening_hours: 영업 시간 목록 (One-to-many, owned, cascade delete)
    """

    __tablename__ = "places"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[PlaceStatus] = mapped_column(
        Enum(PlaceStatus, native_enum=False, length=20),
        nullable=False,
        default=PlaceStatus.PROPOSED,
    )
    modified_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    category = relationship("Category")
    # 소유 관계 — 장소 삭제 시 DB 레벨 CASCADE로 함께 삭제 (Owned rows, removed by FK cascade)
    location = relationship(
        "Location",
        back_populates="place",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    opening_hours = relationship(
        "OpeningHours",
        back_populates="place",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OpeningHours.id",
    )


class Location(Base):
    """장소 위치 모델 — 장소가 독점 소유.

    Location owned exclusively by one Place (unique place_id).
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)
    place_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("places.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    place = relationship("Place", back_populates="location")


class OpeningHours(Base):
    """영업 시간 모델 — 요일별 개점/폐점 시각.

    Opening hours for one week day, owned by a Place.
    """

    __tablename__ = "opening_hours"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    week_day: Mapped[DayOfWeek] = mapped_column(
        Enum(DayOfWeek, native_enum=False, length=10), nullable=False
    )
    open_time: Mapped[time] = mapped_column(Time, nullable=False)
    close_time: Mapped[time] = mapped_column(Time, nullable=False)
    place_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("places.id", ondelete="CASCADE"), nullable=False
    )

    place = relationship("Place", back_populates="opening_hours")
