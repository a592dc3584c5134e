"""Deep health check 서비스 — 의존 DB 상태 집계.

Deep Health Service — Probes each dependent database and aggregates the
results into a composite status.

Rules:
    - service: 응답 가능하면 항상 UP (Always UP while the process answers)
    - 의존성: SELECT 1 성공 시 UP, 실패 또는 타임아웃 시 DOWN
      (Dependency is UP when ``SELECT 1`` succeeds, DOWN on failure or timeout)
    - status: 모든 의존성이 UP일 때만 UP (UP only if every dependency is UP)
"""

import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from openbank.config import settings
from openbank.schemas.health import DeepSystemStatusResponse, DependenciesStatus, HealthStatus

logger = logging.getLogger(__name__)


class DeepHealthService:
    """의존성 상태를 점검하는 서비스.

    Service probing dependencies concurrently, each bounded by ``timeout``.
    """

    def __init__(self, timeout: float) -> None:
        self.timeout: float = timeout

    async def _ping(self, engine: AsyncEngine) -> None:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def probe(self, name: str, engine: AsyncEngine) -> HealthStatus:
        """단일 DB를 점검합니다.

        Probe one database. Any failure, including a timeout, means DOWN.
        """
        try:
            await asyncio.wait_for(self._ping(engine), timeout=self.timeout)
        except Exception as exc:
            logger.warning("Health probe %s is DOWN: %s: %s", name, type(exc).__name__, exc)
            return HealthStatus.DOWN
        return HealthStatus.UP

    async def check(self, probes: dict[str, AsyncEngine]) -> DeepSystemStatusResponse:
        """모든 의존성을 점검하고 종합 상태를 반환합니다.

        Probe every dependency concurrently and aggregate the results.

        Args:
            probes: 의존성 이름 → 엔진 (Dependency name → engine; keys match DependenciesStatus fields)

        Returns:
            DeepSystemStatusResponse: 종합 상태 (Composite status)
        """
        names: list[str] = list(probes)
        results: list[HealthStatus] = await asyncio.gather(
            *(self.probe(name, probes[name]) for name in names)
        )
        dependencies: dict[str, HealthStatus] = dict(zip(names, results))

        overall: HealthStatus = (
            HealthStatus.UP
            if all(result == HealthStatus.UP for result in results)
            else HealthStatus.DOWN
        )
        return DeepSystemStatusResponse(
            status=overall,
            service=HealthStatus.UP,
            dependencies=DependenciesStatus(**dependencies),
        )


# 싱글턴 인스턴스 — Singleton instance
deep_health_service: DeepHealthService = DeepHealthService(settings.HEALTH_CHECK_TIMEOUT_SECONDS)
