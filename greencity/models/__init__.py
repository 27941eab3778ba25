"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for relationship resolution and
``Base.metadata.create_all``.

Modules:
    user: 사용자 (Users referenced by other entities)
    place: 장소, 분류, 위치, 영업 시간 (Place aggregate)
    habit: 언어, 습관, 번역, 배정, 진행 상태 (Habit catalog and statuses)
    econews: 에코뉴스, 댓글 (EcoNews and threaded comments)
"""

from greencity.models.user import User
from greencity.models.place import Category, DayOfWeek, Location, OpeningHours, Place, PlaceStatus
from greencity.models.habit import Habit, HabitAssign, HabitStatus, HabitTranslation, Language
from greencity.models.econews import EcoNews, EcoNewsComment

__all__ = [
    "User",
    "Category", "DayOfWeek", "Location", "OpeningHours", "Place", "PlaceStatus",
    "Habit", "HabitAssign", "HabitStatus", "HabitTranslation", "Language",
    "EcoNews", "EcoNewsComment",
]
