"""에코뉴스 댓글 Pydantic 스키마.

EcoNews comment request/response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    """댓글 작성 요청 스키마.

    Attributes:
        text: 댓글 내용 (Comment text)
        user_id: 작성자 ID (Author id; authentication is handled upstream)
        parent_comment_id: 부모 댓글 ID, 없으면 최상위 댓글 (None for a top-level comment)
    """

    text: str = Field(min_length=1, max_length=8000)
    user_id: int
    parent_comment_id: int | None = None


class CommentUpdate(BaseModel):
    text: str = Field(min_length=1, max_length=8000)


class CommentResponse(BaseModel):
    id: int
    text: str
    created_date: datetime
    modified_date: datetime | None = None
    parent_comment_id: int | None = None
    eco_news_id: int
    user_id: int
    replies: int = 0  # 답글 수 — 최상위 댓글 목록에서만 계산 (Reply count, top-level listing only)
