"""헬스 체크 테스트 — /actuator/health, /actuator/deephealth.

Health check tests — Liveness and the aggregated deep health check,
including a dependency going down and recovering.
"""

import asyncio

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

from openbank.api.deps import get_health_probes
from openbank.main import app
from openbank.schemas.health import HealthStatus
from openbank.services.health_service import DeepHealthService


class TestLiveness:
    """얕은 헬스 체크 테스트."""

    async def test_health(self, client: AsyncClient):
        """항상 UP."""
        res = await client.get("/actuator/health")
        assert res.status_code == 200
        assert res.json() == {"status": "UP"}


class TestDeepHealth:
    """Deep health check 테스트."""

    async def test_all_up(self, client: AsyncClient):
        """두 DB 모두 정상이면 UP."""
        res = await client.get("/actuator/deephealth")
        assert res.status_code == 200
        assert res.json() == {
            "status": "UP",
            "service": "UP",
            "dependencies": {"openbank_db": "UP", "security_db": "UP"},
        }

    async def test_openbank_db_down(
        self, client: AsyncClient, broken_engine: AsyncEngine, security_engine: AsyncEngine
    ):
        """openbankdb 장애 시 status DOWN, service는 UP."""
        app.dependency_overrides[get_health_probes] = lambda: {
            "openbank_db": broken_engine,
            "security_db": security_engine,
        }
        res = await client.get("/actuator/deephealth")
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "DOWN"
        assert data["service"] == "UP"
        assert data["dependencies"] == {"openbank_db": "DOWN", "security_db": "UP"}

    async def test_both_down(self, client: AsyncClient, broken_engine: AsyncEngine):
        """두 DB 모두 장애."""
        app.dependency_overrides[get_health_probes] = lambda: {
            "openbank_db": broken_engine,
            "security_db": broken_engine,
        }
        res = await client.get("/actuator/deephealth")
        data = res.json()
        assert data["status"] == "DOWN"
        assert data["dependencies"] == {"openbank_db": "DOWN", "security_db": "DOWN"}

    async def test_recovery(
        self,
        client: AsyncClient,
        engine: AsyncEngine,
        security_engine: AsyncEngine,
        broken_engine: AsyncEngine,
    ):
        """장애 복구 후 다시 UP — 결과를 캐시하지 않음."""
        app.dependency_overrides[get_health_probes] = lambda: {
            "openbank_db": engine,
            "security_db": broken_engine,
        }
        res = await client.get("/actuator/deephealth")
        assert res.json()["status"] == "DOWN"

        app.dependency_overrides[get_health_probes] = lambda: {
            "openbank_db": engine,
            "security_db": security_engine,
        }
        res2 = await client.get("/actuator/deephealth")
        assert res2.json()["status"] == "UP"


class SlowHealthService(DeepHealthService):
    async def _ping(self, engine: AsyncEngine) -> None:
        await asyncio.sleep(5)


class TestDeepHealthService:
    """프로브 단위 테스트."""

    async def test_timeout_is_down(self, engine: AsyncEngine):
        """타임아웃 시 DOWN."""
        service = SlowHealthService(timeout=0.05)
        assert await service.probe("openbank_db", engine) == HealthStatus.DOWN

    async def test_probe_up(self, engine: AsyncEngine):
        """SELECT 1 성공 시 UP."""
        service = DeepHealthService(timeout=2.0)
        assert await service.probe("openbank_db", engine) == HealthStatus.UP
