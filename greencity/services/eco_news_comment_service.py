"""에코뉴스 댓글 서비스.

EcoNews comment service — Threaded comments with soft delete.
Threads are two levels deep: replies may only target top-level comments.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.econews import EcoNews, EcoNewsComment
from greencity.repositories.eco_news_comment_repository import (
    eco_news_comment_repository,
    eco_news_repository,
)
from greencity.repositories.user_repository import user_repository
from greencity.schemas.comment import CommentCreate, CommentResponse
from greencity.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class EcoNewsCommentService:

    def to_response(self, comment: EcoNewsComment, replies: int = 0) -> CommentResponse:
        return CommentResponse(
            id=comment.id,
            text=comment.text,
            created_date=comment.created_date,
            modified_date=comment.modified_date,
            parent_comment_id=comment.parent_comment_id,
            eco_news_id=comment.eco_news_id,
            user_id=comment.user_id,
            replies=replies,
        )

    async def _get_comment(self, db: AsyncSession, comment_id: int) -> EcoNewsComment:
        comment: EcoNewsComment | None = await eco_news_comment_repository.get_alive(db, comment_id)
        if comment is None:
            raise NotFoundError(f"Comment not found by id: {comment_id}")
        return comment

    async def find_all_comments(
        self,
        db: AsyncSession,
        eco_news_id: int,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[list[CommentResponse], int]:
        """뉴스의 최상위 댓글 페이지 (답글 수 포함).

        One page of top-level comments of a news item, each with its reply count.
        """
        comments, total = await eco_news_comment_repository.find_top_level_by_news(
            db, eco_news_id, page, per_page
        )
        items: list[CommentResponse] = []
        for comment in comments:
            replies: int = await eco_news_comment_repository.count_replies(db, comment.id)
            items.append(self.to_response(comment, replies))
        return items, total

    async def find_all_replies(
        self,
        db: AsyncSession,
        parent_comment_id: int,
        page: int = 0,
        per_page: int = 20,
    ) -> tuple[list[CommentResponse], int]:
        replies, total = await eco_news_comment_repository.find_replies(
            db, parent_comment_id, page, per_page
        )
        return [self.to_response(r) for r in replies], total

    async def count_replies(self, db: AsyncSession, parent_comment_id: int) -> int:
        return await eco_news_comment_repository.count_replies(db, parent_comment_id)

    async def count_of_comments(self, db: AsyncSession, eco_news_id: int) -> int:
        return await eco_news_comment_repository.count_of_comments(db, eco_news_id)

    async def create_comment(
        self,
        db: AsyncSession,
        eco_news_id: int,
        data: CommentCreate,
    ) -> CommentResponse:
        """댓글 또는 답글을 작성합니다.

        Create a top-level comment or a reply.

        Raises:
            NotFoundError: 뉴스, 작성자 또는 부모 댓글이 없을 때 (News item, author or parent missing)
            BadRequestError: 답글에 답글을 달거나 다른 뉴스의 댓글에 답글을 달 때
                             (Replying to a reply, or to a comment of another news item)
        """
        news: EcoNews | None = await eco_news_repository.get_by_id(db, eco_news_id)
        if news is None:
            raise NotFoundError(f"Eco news not found by id: {eco_news_id}")

        if not await user_repository.exists(db, {"id": data.user_id}):
            raise NotFoundError(f"User not found by id: {data.user_id}")

        if data.parent_comment_id is not None:
            parent: EcoNewsComment = await self._get_comment(db, data.parent_comment_id)
            if parent.parent_comment_id is not None:
                raise BadRequestError("Cannot make a reply to a reply")
            if parent.eco_news_id != eco_news_id:
                raise BadRequestError(
                    f"Comment {parent.id} does not belong to eco news {eco_news_id}"
                )

        comment: EcoNewsComment = await eco_news_comment_repository.create(
            db,
            {
                "text": data.text,
                "eco_news_id": eco_news_id,
                "user_id": data.user_id,
                "parent_comment_id": data.parent_comment_id,
                "created_date": datetime.now(timezone.utc),
            },
        )
        logger.info("Created comment id=%s on eco news id=%s", comment.id, eco_news_id)
        return self.to_response(comment)

    async def update_text(self, db: AsyncSession, comment_id: int, text: str) -> CommentResponse:
        comment: EcoNewsComment = await self._get_comment(db, comment_id)
        comment.text = text
        comment.modified_date = datetime.now(timezone.utc)
        await db.flush()
        return self.to_response(comment)

    async def soft_delete(self, db: AsyncSession, comment_id: int) -> None:
        """댓글을 논리 삭제합니다 (Mark a comment as deleted; the row stays)."""
        comment: EcoNewsComment = await self._get_comment(db, comment_id)
        comment.deleted = True
        await db.flush()
        logger.info("Soft-deleted comment id=%s", comment_id)


eco_news_comment_service: EcoNewsCommentService = EcoNewsCommentService()
