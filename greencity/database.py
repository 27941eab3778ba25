"""DB 엔진, 세션 팩토리, ORM 베이스.

Async SQLAlchemy wiring: one engine per process, a session factory, the
declarative base shared by every model, and the ``get_db`` request dependency.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from greencity.config import settings

# 연결 전 ping으로 끊긴 커넥션 재사용 방지 (Stale pooled connections are re-checked)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
)

# 커밋 후에도 응답 매핑에서 속성 접근 가능 (Attributes stay readable after commit)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """모든 GreenCity 모델의 선언적 베이스 (Declarative base for every model)."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청마다 세션 하나를 열어 줍니다.

    One session per request. Routers commit after the service returns;
    anything left uncommitted is rolled back when the session closes.
    """
    async with async_session() as session:
        yield session
