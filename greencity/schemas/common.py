"""공통 응답 스키마 — 페이지, 카운트.

Response shapes shared across domains.
"""

from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

ItemT = TypeVar("ItemT")


class PaginatedResponse(BaseModel, Generic[ItemT]):
    """0부터 시작하는 페이지 응답.

    One page of results. ``page`` is zero-based; ``total`` counts every
    matching item across all pages.
    """

    items: list[ItemT]
    total: int
    page: int
    per_page: int

    @classmethod
    def of(cls, items: Sequence[ItemT], total: int, page: int, per_page: int) -> "PaginatedResponse[ItemT]":
        return cls(items=list(items), total=total, page=page, per_page=per_page)


class CountResponse(BaseModel):
    count: int
