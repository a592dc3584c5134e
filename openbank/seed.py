"""초기 데이터 시드 스크립트 — 샘플 고객과 시스템 속성 생성.

Seed script — Creates sample clients in openbankdb and system properties
in securitydb. Run once to bootstrap a development environment.

Usage:
    python -m openbank.seed

Creates:
    - 3명의 고객: REGULAR, PREMIUM, CORPORATE (3 clients, one per client type)
    - securitydb 스키마 및 world.api.url 속성 (securitydb schema and the world.api.url property)
"""

import asyncio
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from openbank.database import Base, SecurityBase, async_session, engine, security_engine, security_session
from openbank.models import *  # noqa: F401,F403 — register all models with metadata
from openbank.repositories.client_repository import client_repository
from openbank.repositories.system_property_repository import system_property_repository
from openbank.services.world_service import WORLD_API_URL_PROPERTY

SAMPLE_CLIENTS: list[dict[str, Any]] = [
    {
        "client": {"type": "REGULAR", "rating": 500, "special_offers": "Free credit card for one year."},
        "person": {
            "person_identification": "191212121212",
            "first_name": "John",
            "last_name": "Doe",
            "mail": "john.doe@test.se",
        },
        "accounts": [
            {
                "balance": 500,
                "transactions": [
                    {"transaction_type": "DEPOSIT", "message": "500$ in deposit"},
                ],
            },
        ],
    },
    {
        "client": {"type": "PREMIUM", "rating": 1200, "special_offers": "Lower mortgage rate.", "premium_rating": 3},
        "person": {
            "person_identification": "198112189876",
            "first_name": "Jane",
            "last_name": "Svensson",
            "mail": "jane.svensson@test.se",
        },
        "accounts": [
            {
                "balance": 1500,
                "transactions": [
                    {"transaction_type": "DEPOSIT", "message": "2000$ in deposit"},
                    {"transaction_type": "WITHDRAWAL", "message": "500$ in withdrawal"},
                ],
            },
        ],
    },
    {
        "client": {"type": "CORPORATE", "rating": 800},
        "person": {
            "person_identification": "197010101231",
            "first_name": "Erik",
            "last_name": "Larsson",
            "mail": "erik.larsson@corp.se",
        },
        "accounts": [],
    },
]

DEFAULT_SYSTEM_PROPERTIES: dict[str, str] = {
    # 빈 값이면 hello world를 로컬에서 응답 (Empty value answers hello world locally)
    WORLD_API_URL_PROPERTY: "",
}


async def seed_clients(db: AsyncSession) -> int:
    """샘플 고객을 생성합니다 (이미 있으면 건너뜀).

    Insert the sample clients that do not exist yet.

    Returns:
        int: 생성된 고객 수 (Number of clients created)
    """
    created: int = 0
    for sample in SAMPLE_CLIENTS:
        pid: str = sample["person"]["person_identification"]
        if await client_repository.get_by_person_identification(db, pid) is not None:
            continue
        await client_repository.create_with_details(db, sample["client"], sample["person"], sample["accounts"])
        created += 1
    return created


async def seed_system_properties(security_db: AsyncSession) -> int:
    """기본 시스템 속성을 생성합니다 (기존 값은 유지).

    Insert default system properties without overwriting existing values.

    Returns:
        int: 생성된 속성 수 (Number of properties created)
    """
    created: int = 0
    for name, value in DEFAULT_SYSTEM_PROPERTIES.items():
        if await system_property_repository.exists(security_db, {"name": name}):
            continue
        await system_property_repository.set_value(security_db, name, value)
        created += 1
    return created


async def seed() -> None:
    """두 데이터베이스를 초기 데이터로 시드합니다.

    Seed both databases. Tables are created if missing; already seeded
    rows are skipped.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with security_engine.begin() as conn:
        await conn.run_sync(SecurityBase.metadata.create_all)

    async with async_session() as db:
        clients: int = await seed_clients(db)
        await db.commit()

    async with security_session() as security_db:
        properties: int = await seed_system_properties(security_db)
        await security_db.commit()

    print(f"Seeded: clients={clients}, system_properties={properties}")

    await engine.dispose()
    await security_engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
