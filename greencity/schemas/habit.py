"""습관 Pydantic 스키마.

Habit request/response schemas.
"""

from datetime import date

from pydantic import BaseModel, Field


class HabitTranslationData(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    habit_item: str | None = None
    language_code: str


class HabitTranslationResponse(HabitTranslationData):
    id: int
    habit_id: int


class HabitCreate(BaseModel):
    """습관 생성 요청 스키마.

    Habit creation request. ``image`` is a storage URL obtained from the
    storage upload flow; temp uploads are moved to their final key on save.
    """

    image: str | None = None
    translations: list[HabitTranslationData] = Field(min_length=1)


class HabitUpdate(BaseModel):
    image: str | None = None
    translations: list[HabitTranslationData] = []


class HabitResponse(BaseModel):
    id: int
    image: str | None = None
    translations: list[HabitTranslationResponse] = []


class HabitStatusResponse(BaseModel):
    id: int
    habit_assign_id: int
    working_days: int
    habit_streak: int
    last_enrollment_date: date | None = None
