"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite databases (one per logical database),
sessions, and an httpx client with the database, health probe and broker
dependencies overridden. Schemas are created fresh for every test.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from openbank.api.deps import get_health_probes
from openbank.broker import EmbeddedBroker, broker
from openbank.database import Base, SecurityBase, get_db, get_security_db
from openbank.main import app
from openbank.models import *  # noqa: F401,F403 — register all models with metadata
from openbank.repositories.client_repository import client_repository
from openbank.services.batch_service import slow_mock_batch

TEST_DATABASE_URL = "sqlite+aiosqlite://"

# 유효한 개인 식별 번호 — Valid person identification numbers (Luhn checked)
JOHN_PID = "191212121212"
JANE_PID = "198112189876"

API = "/api/openbank/v1"


def _memory_engine() -> AsyncEngine:
    return create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """openbankdb 테스트 엔진. 스키마를 생성합니다."""
    eng = _memory_engine()
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def security_engine() -> AsyncGenerator[AsyncEngine, None]:
    """securitydb 테스트 엔진. 스키마를 생성합니다."""
    eng = _memory_engine()
    async with eng.begin() as conn:
        await conn.run_sync(SecurityBase.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def broken_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """열 수 없는 DB 파일을 가리키는 엔진 — 다운된 의존성 (Engine for a database that is down)."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'down.db'}")
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 openbankdb 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def security_db(security_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 securitydb 세션을 제공합니다."""
    factory = async_sessionmaker(security_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(
    db: AsyncSession,
    security_db: AsyncSession,
    engine: AsyncEngine,
    security_engine: AsyncEngine,
) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션과 헬스 프로브를 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    async def _override_get_security_db() -> AsyncGenerator[AsyncSession, None]:
        yield security_db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_security_db] = _override_get_security_db
    app.dependency_overrides[get_health_probes] = lambda: {
        "openbank_db": engine,
        "security_db": security_engine,
    }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def running_broker() -> AsyncGenerator[EmbeddedBroker, None]:
    """애플리케이션 브로커의 리스너 컨테이너를 시작합니다."""
    await broker.start()
    yield broker
    await broker.stop()


@pytest.fixture
def instant_batch(monkeypatch) -> None:
    """배치 지연을 0초로 설정합니다 (Simulated batch latency set to zero)."""
    monkeypatch.setattr(slow_mock_batch, "sleep_time", 0)


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def regular_client(db: AsyncSession):
    """REGULAR 고객 (계좌 1개, 거래 1건)을 생성합니다."""
    c = await client_repository.create_with_details(
        db,
        {"type": "REGULAR", "rating": 500, "special_offers": "Free credit card for one year."},
        {
            "person_identification": JOHN_PID,
            "first_name": "John",
            "last_name": "Doe",
            "mail": "john.doe@test.se",
        },
        [
            {
                "balance": 500,
                "transactions": [{"transaction_type": "DEPOSIT", "message": "500$ in deposit"}],
            },
        ],
    )
    await db.commit()
    return c


def client_payload(
    person_identification: str = JOHN_PID,
    client_type: dict | None = None,
    **person,
) -> dict:
    """ClientApi 요청 본문을 생성합니다 (Build a ClientApi JSON payload)."""
    return {
        "person": {
            "person_identification": person_identification,
            "first_name": person.get("first_name", "John"),
            "last_name": person.get("last_name", "Doe"),
            "mail": person.get("mail", "john.doe@test.se"),
        },
        "account_list": [],
        "client_type": client_type or {"type": "REGULAR", "rating": 500},
    }
