"""습관 관련 SQLAlchemy ORM 모델 정의.

Habit-related SQLAlchemy ORM model definitions.

Tables:
    - languages: 번역 언어 (Translation languages, unique code)
    - habits: 습관 (Habit catalog entries)
    - habit_translations: 언어별 습관 번역 (One row per habit + language)
    - habit_assigns: 사용자-습관 배정 (User to habit assignment)
    - habit_statuses: 배정별 진행 상태 (Progress of one assignment)
"""

from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greencity.database import Base


class Language(Base):
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 언어 코드 — ISO-like language code, e.g. "en", "ua"
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)


class Habit(Base):
    """습관 모델.

    Habit catalog entry. The image column holds a storage URL only; the bytes
    live in S3 or the local uploads directory.

    Relationships:
        translations: 언어별 번역 목록 (Translations, cascade delete)
    """

    __tablename__ = "habits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)

    translations = relationship(
        "HabitTranslation",
        back_populates="habit",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="HabitTranslation.id",
    )


class HabitTranslation(Base):
    """습관 번역 모델 — 습관 + 언어 조합당 한 행.

    Habit translation, unique per (habit, language).
    """

    __tablename__ = "habit_translations"
    __table_args__ = (UniqueConstraint("habit_id", "language_id", name="uq_habit_translation_language"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    habit_item: Mapped[str | None] = mapped_column(Text, nullable=True)
    habit_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("habits.id", ondelete="CASCADE"), nullable=False
    )
    language_id: Mapped[int] = mapped_column(Integer, ForeignKey("languages.id"), nullable=False)

    habit = relationship("Habit", back_populates="translations")
    language = relationship("Language")


class HabitAssign(Base):
    """사용자-습관 배정 모델.

    Assignment of a habit to a user. The create_date is part of the composite
    key used to look habit statuses up.
    """

    __tablename__ = "habit_assigns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    habit_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("habits.id", ondelete="CASCADE"), nullable=False
    )
    create_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    acquired: Mapped[bool] = mapped_column(Boolean, default=False)
    suspended: Mapped[bool] = mapped_column(Boolean, default=False)


class HabitStatus(Base):
    """습관 진행 상태 모델 — 배정당 하나.

    Progress status of a single habit assignment. User, habit and creation
    timestamp are reached through the assignment.
    """

    __tablename__ = "habit_statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    habit_assign_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("habit_assigns.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    working_days: Mapped[int] = mapped_column(Integer, default=0)
    habit_streak: Mapped[int] = mapped_column(Integer, default=0)
    last_enrollment_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    habit_assign = relationship("HabitAssign")
