"""앱 공통 동작 테스트 — 헬스 체크, 요청 로깅.

Application-level tests: health check and request logging middleware.
"""

import logging

from httpx import AsyncClient

from greencity.utils.time import now_in_zone


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_request_logged(client: AsyncClient, caplog):
    caplog.set_level(logging.INFO, logger="greencity.access")
    await client.get("/api/v1/categories")
    records = [r for r in caplog.records if r.name == "greencity.access"]
    assert any("GET /api/v1/categories -> 200" in r.getMessage() for r in records)


async def test_error_logged_and_body_preserved(client: AsyncClient, caplog):
    """4xx 응답은 WARNING으로 기록되고 body는 그대로 전달."""
    caplog.set_level(logging.INFO, logger="greencity.access")
    res = await client.get("/api/v1/places/9999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Place not found by id: 9999"
    warnings = [r for r in caplog.records if r.name == "greencity.access" and r.levelno == logging.WARNING]
    assert any("-> 404" in r.getMessage() for r in warnings)


def test_now_in_zone_is_aware():
    now = now_in_zone()
    assert now.tzinfo is not None
    assert str(now.tzinfo) == "Europe/Kyiv"
    assert str(now_in_zone("UTC").tzinfo) == "UTC"
