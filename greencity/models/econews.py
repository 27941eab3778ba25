"""에코뉴스 및 댓글 SQLAlchemy ORM 모델.

EcoNews and threaded comment models.
Comments form a two-level thread: a null parent_comment_id marks a top-level
comment, replies point at their top-level parent. Deletion is logical only.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from greencity.database import Base


class EcoNews(Base):
    __tablename__ = "eco_news"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )


class EcoNewsComment(Base):
    """에코뉴스 댓글 모델 (소프트 삭제).

    EcoNews comment with soft delete.

    Attributes:
        parent_comment_id: 부모 댓글 FK, None이면 최상위 댓글 (Null for top-level comments)
        deleted: 논리 삭제 플래그 (Soft-delete flag, filtered on every read)
    """

    __tablename__ = "eco_news_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    modified_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    parent_comment_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("eco_news_comments.id", ondelete="CASCADE"), nullable=True, index=True
    )
    eco_news_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("eco_news.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
