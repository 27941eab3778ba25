"""에코뉴스 댓글 라우터.

EcoNews Comment Router — Threaded comments of news items.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.database import get_db
from greencity.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from greencity.schemas.common import CountResponse, PaginatedResponse
from greencity.services.eco_news_comment_service import eco_news_comment_service

router: APIRouter = APIRouter()


@router.get("/{eco_news_id}/comments", response_model=PaginatedResponse[CommentResponse])
async def list_comments(
    eco_news_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    page: int = Query(0, ge=0),
    per_page: int = Query(20, ge=1, le=100),
) -> PaginatedResponse[CommentResponse]:
    """최상위 댓글 목록 (오래된 순). Top-level comments, oldest first."""
    items, total = await eco_news_comment_service.find_all_comments(db, eco_news_id, page, per_page)
    return PaginatedResponse.of(items, total, page, per_page)


@router.get("/{eco_news_id}/comments/count", response_model=CountResponse)
async def count_comments(
    eco_news_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CountResponse:
    return CountResponse(count=await eco_news_comment_service.count_of_comments(db, eco_news_id))


@router.post("/{eco_news_id}/comments", response_model=CommentResponse, status_code=201)
async def create_comment(
    eco_news_id: int,
    data: CommentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CommentResponse:
    result: CommentResponse = await eco_news_comment_service.create_comment(db, eco_news_id, data)
    await db.commit()
    return result


@router.get("/comments/{parent_comment_id}/replies", response_model=PaginatedResponse[CommentResponse])
async def list_replies(
    parent_comment_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    page: int = Query(0, ge=0),
    per_page: int = Query(20, ge=1, le=100),
) -> PaginatedResponse[CommentResponse]:
    """답글 목록 (오래된 순). Replies to a comment, oldest first."""
    items, total = await eco_news_comment_service.find_all_replies(
        db, parent_comment_id, page, per_page
    )
    return PaginatedResponse.of(items, total, page, per_page)


@router.get("/comments/{parent_comment_id}/replies/count", response_model=CountResponse)
async def count_replies(
    parent_comment_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CountResponse:
    return CountResponse(count=await eco_news_comment_service.count_replies(db, parent_comment_id))


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    data: CommentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CommentResponse:
    result: CommentResponse = await eco_news_comment_service.update_text(db, comment_id, data.text)
    await db.commit()
    return result


@router.delete("/comments/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """댓글 논리 삭제. Soft delete; the row is kept with ``deleted`` set."""
    await eco_news_comment_service.soft_delete(db, comment_id)
    await db.commit()
