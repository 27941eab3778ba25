"""에코뉴스 댓글 레포지토리 — 스레드 댓글 페이지 조회 및 카운트.

EcoNews Comment Repository — Paged thread queries and counters.

Every read goes through ``_alive()`` so soft-deleted comments never show up in
listings or counts. All listings are ordered by creation time ascending,
ties broken by id.
"""

from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.econews import EcoNews, EcoNewsComment
from greencity.repositories.base import BaseRepository


def _alive(query: Select) -> Select:
    """소프트 삭제 필터 (Exclude soft-deleted comments)."""
    return query.where(EcoNewsComment.deleted.is_(False))


_OLDEST_FIRST = (EcoNewsComment.created_date.asc(), EcoNewsComment.id.asc())


class EcoNewsCommentRepository(BaseRepository[EcoNewsComment]):
    """에코뉴스 댓글 테이블 레포지토리.

    Repository for the eco_news_comments table.
    """

    def __init__(self) -> None:
        super().__init__(EcoNewsComment)

    async def get_alive(self, db: AsyncSession, comment_id: int) -> EcoNewsComment | None:
        """삭제되지 않은 댓글을 ID로 조회합니다 (Fetch a non-deleted comment)."""
        query: Select = _alive(select(EcoNewsComment).where(EcoNewsComment.id == comment_id))
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_top_level_by_news(
        self,
        db: AsyncSession,
        eco_news_id: int,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[Sequence[EcoNewsComment], int]:
        """뉴스의 최상위 댓글을 오래된 순으로 페이지 조회합니다.

        Retrieve one page of top-level comments of a news item, oldest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            eco_news_id: 뉴스 ID (News item id)
            page: 페이지 번호, 0부터 시작 (Page number, 0-based)
            per_page: 페이지 크기 (Page size)

        Returns:
            tuple[Sequence[EcoNewsComment], int]: (댓글 목록, 전체 개수)
        """
        query: Select = _alive(
            select(EcoNewsComment).where(
                EcoNewsComment.parent_comment_id.is_(None),
                EcoNewsComment.eco_news_id == eco_news_id,
            )
        ).order_by(*_OLDEST_FIRST)
        return await self.get_paginated(db, query, page, per_page)

    async def find_replies(
        self,
        db: AsyncSession,
        parent_comment_id: int,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[Sequence[EcoNewsComment], int]:
        """댓글의 답글을 오래된 순으로 페이지 조회합니다.

        Retrieve one page of replies to ``parent_comment_id``, oldest first.
        """
        query: Select = _alive(
            select(EcoNewsComment).where(EcoNewsComment.parent_comment_id == parent_comment_id)
        ).order_by(*_OLDEST_FIRST)
        return await self.get_paginated(db, query, page, per_page)

    async def count_replies(self, db: AsyncSession, parent_comment_id: int) -> int:
        query: Select = _alive(
            select(func.count(EcoNewsComment.id)).where(
                EcoNewsComment.parent_comment_id == parent_comment_id
            )
        )
        return (await db.execute(query)).scalar() or 0

    async def count_of_comments(self, db: AsyncSession, eco_news_id: int) -> int:
        """뉴스의 삭제되지 않은 최상위 댓글 수 (Non-deleted top-level comment count)."""
        query: Select = _alive(
            select(func.count(EcoNewsComment.id)).where(
                EcoNewsComment.parent_comment_id.is_(None),
                EcoNewsComment.eco_news_id == eco_news_id,
            )
        )
        return (await db.execute(query)).scalar() or 0


class EcoNewsRepository(BaseRepository[EcoNews]):

    def __init__(self) -> None:
        super().__init__(EcoNews)


eco_news_comment_repository: EcoNewsCommentRepository = EcoNewsCommentRepository()
eco_news_repository: EcoNewsRepository = EcoNewsRepository()
