"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite (aiosqlite) database, session, and
httpx client fixtures. Every test gets a fresh database; the schema is
created from the ORM metadata.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

# 앱 임포트 전에 환경 설정 — Settings are read at import time
os.environ["LOCAL_UPLOADS_DIR"] = tempfile.mkdtemp(prefix="greencity_test_")
os.environ["AWS_ACCESS_KEY_ID"] = ""
os.environ["AWS_S3_BUCKET"] = ""
os.environ["AXIOM_API_TOKEN"] = ""
os.environ["AXIOM_DATASET"] = ""

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from greencity.database import Base, get_db  # noqa: E402
from greencity.main import app  # noqa: E402
from greencity.models import *  # noqa: F401,F403,E402 — register all models with metadata

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 인메모리 DB를 만듭니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SAVEPOINT가 동작하도록 드라이버의 암묵적 BEGIN을 끄고 직접 BEGIN 실행
    # pysqlite-style drivers need explicit BEGIN for SAVEPOINT support
    @event.listens_for(eng.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(eng.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        try:
            await session.commit()
        except Exception:
            await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def user(db: AsyncSession):
    """테스트 사용자를 생성합니다."""
    from greencity.models.user import User
    u = User(name="Test User", email="user@test.com")
    db.add(u)
    await db.flush()
    await db.refresh(u)
    return u


@pytest_asyncio.fixture
async def languages(db: AsyncSession):
    """en / ua 언어를 생성합니다."""
    from greencity.models.habit import Language
    result = {}
    for code in ("en", "ua"):
        language = Language(code=code)
        db.add(language)
        await db.flush()
        await db.refresh(language)
        result[code] = language
    return result


@pytest_asyncio.fixture
async def eco_news(db: AsyncSession, user):
    """테스트 뉴스를 생성합니다."""
    from greencity.models.econews import EcoNews
    news = EcoNews(title="Test News", author_id=user.id)
    db.add(news)
    await db.flush()
    await db.refresh(news)
    return news


def central_park_payload() -> dict:
    return {
        "name": "Central Park",
        "category": {"name": "Park"},
        "location": {"address": "Khreshchatyk 1", "lat": 50.45, "lng": 30.52},
        "opening_hours": [
            {"week_day": "MONDAY", "open_time": "09:00:00", "close_time": "18:00:00"},
        ],
    }


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
