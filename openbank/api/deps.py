"""FastAPI 의존성 주입 모듈 — 헬스 프로브 및 브로커.

FastAPI dependency injection module — Health probes and the embedded broker.
Kept as dependencies so tests can override them with
``app.dependency_overrides``.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from openbank.broker import EmbeddedBroker, broker
from openbank.database import engine, security_engine


def get_health_probes() -> dict[str, AsyncEngine]:
    """Deep health check 대상 DB 엔진 목록.

    Engines probed by the deep health check, keyed by dependency name.
    """
    return {"openbank_db": engine, "security_db": security_engine}


def get_broker() -> EmbeddedBroker:
    return broker
