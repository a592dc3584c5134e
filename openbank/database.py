"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up one async SQLAlchemy engine, session factory, and ORM base class
per logical database:

    - openbankdb: 고객/계좌 데이터 (Clients, persons, accounts, transactions)
    - securitydb: 시스템 속성 (System properties)
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from openbank.config import settings


def build_engine(url: str) -> AsyncEngine:
    """연결 URL로부터 비동기 엔진을 생성합니다.

    Create an async engine for the given URL. Pool sizing and the asyncpg
    statement cache switch only apply to server databases.
    """
    kwargs: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}

    backend: str = make_url(url).get_backend_name()
    if backend != "sqlite":
        kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
        kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
    if make_url(url).get_driver_name() == "asyncpg":
        # 트랜잭션 모드 풀러에서 prepared statement 비활성화
        # Disable prepared statement caches for transaction-mode pooling
        kwargs["connect_args"] = {"statement_cache_size": 0}

    return create_async_engine(url, **kwargs)


# 비동기 데이터베이스 엔진 — Async database engines (one per logical database)
engine: AsyncEngine = build_engine(settings.OPENBANK_DATABASE_URL)
security_engine: AsyncEngine = build_engine(settings.SECURITY_DATABASE_URL)

# 비동기 세션 팩토리 — Async session factories
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
security_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    security_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """openbankdb 선언적 베이스 클래스.

    Declarative base class for all openbankdb ORM models.
    """

    pass


class SecurityBase(DeclarativeBase):
    """securitydb 선언적 베이스 클래스.

    Declarative base class for securitydb ORM models. Kept apart from
    ``Base`` so each database owns its own metadata.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """openbankdb 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an openbankdb session.
    The session is closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_security_db() -> AsyncGenerator[AsyncSession, None]:
    """securitydb 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields a securitydb session.
    """
    async with security_session() as session:
        try:
            yield session
        finally:
            await session.close()
