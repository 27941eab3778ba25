"""에코뉴스 댓글 API 및 레포지토리 테스트.

EcoNews comment tests — threaded paging, counters, soft delete and reply rules.
"""

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from greencity.models.econews import EcoNews, EcoNewsComment
from greencity.repositories.eco_news_comment_repository import eco_news_comment_repository
from tests.conftest import utc

URL = "/api/v1/econews"


async def _comment(db: AsyncSession, news, user, created, parent=None, deleted=False) -> EcoNewsComment:
    comment = EcoNewsComment(
        text=f"comment at {created.isoformat()}",
        eco_news_id=news.id,
        user_id=user.id,
        parent_comment_id=parent.id if parent is not None else None,
        created_date=created,
        deleted=deleted,
    )
    db.add(comment)
    await db.flush()
    await db.refresh(comment)
    return comment


@pytest_asyncio.fixture
async def thread(db: AsyncSession, eco_news, user):
    """최상위 댓글 3개(1개 삭제) + 첫 댓글에 답글 12개(1개 삭제)."""
    # 생성 순서와 작성 시각을 일부러 어긋나게 — insert order differs from created order
    second = await _comment(db, eco_news, user, utc(2024, 1, 2))
    first = await _comment(db, eco_news, user, utc(2024, 1, 1))
    deleted = await _comment(db, eco_news, user, utc(2024, 1, 3), deleted=True)
    replies = []
    for minute in reversed(range(12)):
        replies.append(
            await _comment(db, eco_news, user, utc(2024, 1, 1, 12, minute), parent=first)
        )
    dead_reply = await _comment(db, eco_news, user, utc(2024, 1, 1, 13), parent=first, deleted=True)
    return {"first": first, "second": second, "deleted": deleted, "replies": replies, "dead_reply": dead_reply}


class TestCommentRepository:
    """댓글 레포지토리 쿼리 테스트."""

    async def test_top_level_oldest_first(self, db: AsyncSession, eco_news, thread):
        items, total = await eco_news_comment_repository.find_top_level_by_news(db, eco_news.id, 0, 10)
        assert [c.id for c in items] == [thread["first"].id, thread["second"].id]
        assert total == 2

    async def test_replies_oldest_first_and_paged(self, db: AsyncSession, thread):
        parent_id = thread["first"].id
        items, total = await eco_news_comment_repository.find_replies(db, parent_id, 0, 10)
        assert len(items) == 10
        assert total == 12
        created = [c.created_date for c in items]
        assert created == sorted(created)

        rest, _ = await eco_news_comment_repository.find_replies(db, parent_id, 1, 10)
        assert len(rest) == 2
        assert rest[0].created_date >= items[-1].created_date

    async def test_count_replies_excludes_deleted(self, db: AsyncSession, thread):
        assert await eco_news_comment_repository.count_replies(db, thread["first"].id) == 12
        assert await eco_news_comment_repository.count_replies(db, thread["second"].id) == 0

    async def test_count_of_comments(self, db: AsyncSession, eco_news, thread):
        """삭제되지 않은 최상위 댓글만 카운트."""
        assert await eco_news_comment_repository.count_of_comments(db, eco_news.id) == 2

    async def test_count_of_comments_other_news(self, db: AsyncSession, eco_news, user, thread):
        other = EcoNews(title="Other", author_id=user.id)
        db.add(other)
        await db.flush()
        await _comment(db, other, user, utc(2024, 2, 1))
        assert await eco_news_comment_repository.count_of_comments(db, other.id) == 1
        assert await eco_news_comment_repository.count_of_comments(db, eco_news.id) == 2

    async def test_empty_news(self, db: AsyncSession, eco_news):
        items, total = await eco_news_comment_repository.find_top_level_by_news(db, eco_news.id, 0, 10)
        assert list(items) == []
        assert total == 0
        assert await eco_news_comment_repository.count_of_comments(db, eco_news.id) == 0


class TestCommentApi:
    """댓글 API 테스트."""

    async def test_list_comments_with_reply_counts(self, client: AsyncClient, eco_news, thread):
        res = await client.get(f"{URL}/{eco_news.id}/comments", params={"page": 0, "per_page": 10})
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 2
        assert [c["id"] for c in data["items"]] == [thread["first"].id, thread["second"].id]
        assert data["items"][0]["replies"] == 12
        assert data["items"][1]["replies"] == 0

    async def test_list_replies_page(self, client: AsyncClient, thread):
        """답글 0페이지 10개 — 오래된 순."""
        parent_id = thread["first"].id
        res = await client.get(f"{URL}/comments/{parent_id}/replies", params={"page": 0, "per_page": 10})
        assert res.status_code == 200
        items = res.json()["items"]
        assert len(items) <= 10
        assert [c["created_date"] for c in items] == sorted(c["created_date"] for c in items)
        assert all(c["parent_comment_id"] == parent_id for c in items)

    async def test_counts(self, client: AsyncClient, eco_news, thread):
        res = await client.get(f"{URL}/{eco_news.id}/comments/count")
        assert res.json() == {"count": 2}
        res = await client.get(f"{URL}/comments/{thread['first'].id}/replies/count")
        assert res.json() == {"count": 12}

    async def test_create_comment_and_reply(self, client: AsyncClient, eco_news, user):
        res = await client.post(f"{URL}/{eco_news.id}/comments", json={
            "text": "Great news",
            "user_id": user.id,
        })
        assert res.status_code == 201
        parent = res.json()
        assert parent["parent_comment_id"] is None

        res = await client.post(f"{URL}/{eco_news.id}/comments", json={
            "text": "Agree",
            "user_id": user.id,
            "parent_comment_id": parent["id"],
        })
        assert res.status_code == 201
        assert res.json()["parent_comment_id"] == parent["id"]

        res = await client.get(f"{URL}/comments/{parent['id']}/replies/count")
        assert res.json() == {"count": 1}

    async def test_reply_to_reply_rejected(self, client: AsyncClient, eco_news, user, thread):
        res = await client.post(f"{URL}/{eco_news.id}/comments", json={
            "text": "Nested",
            "user_id": user.id,
            "parent_comment_id": thread["replies"][0].id,
        })
        assert res.status_code == 400

    async def test_reply_to_deleted_comment(self, client: AsyncClient, eco_news, user, thread):
        res = await client.post(f"{URL}/{eco_news.id}/comments", json={
            "text": "Too late",
            "user_id": user.id,
            "parent_comment_id": thread["deleted"].id,
        })
        assert res.status_code == 404

    async def test_comment_on_missing_news(self, client: AsyncClient, user):
        res = await client.post(f"{URL}/9999/comments", json={"text": "?", "user_id": user.id})
        assert res.status_code == 404

    async def test_update_text(self, client: AsyncClient, thread):
        res = await client.patch(f"{URL}/comments/{thread['second'].id}", json={"text": "Edited"})
        assert res.status_code == 200
        assert res.json()["text"] == "Edited"
        assert res.json()["modified_date"] is not None

    async def test_soft_delete(self, client: AsyncClient, db: AsyncSession, eco_news, thread):
        """논리 삭제 후 목록/카운트에서 제외되지만 행은 유지."""
        comment_id = thread["second"].id
        res = await client.delete(f"{URL}/comments/{comment_id}")
        assert res.status_code == 204

        res = await client.get(f"{URL}/{eco_news.id}/comments/count")
        assert res.json() == {"count": 1}

        row = await db.get(EcoNewsComment, comment_id)
        assert row is not None
        assert row.deleted is True

        res = await client.delete(f"{URL}/comments/{comment_id}")
        assert res.status_code == 404

    async def test_comment_by_unknown_user(self, client: AsyncClient, eco_news, thread):
        """없는 작성자 ID는 404이고 댓글은 저장되지 않음."""
        res = await client.post(f"{URL}/{eco_news.id}/comments", json={"text": "Who am I", "user_id": 9999})
        assert res.status_code == 404
        assert "9999" in res.json()["detail"]

        res = await client.get(f"{URL}/{eco_news.id}/comments/count")
        assert res.json() == {"count": 2}

    async def test_reply_by_unknown_user(self, client: AsyncClient, eco_news, thread):
        res = await client.post(f"{URL}/{eco_news.id}/comments", json={
            "text": "Ghost reply",
            "user_id": 9999,
            "parent_comment_id": thread["first"].id,
        })
        assert res.status_code == 404
        res = await client.get(f"{URL}/comments/{thread['first'].id}/replies/count")
        assert res.json() == {"count": 12}
