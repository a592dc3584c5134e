"""헬스 체크 스키마 정의.

Health check schema definitions for the actuator endpoints.
"""

from enum import Enum

from pydantic import BaseModel


class HealthStatus(str, Enum):
    """상태 값 (UP / DOWN)."""

    UP = "UP"
    DOWN = "DOWN"


class DependenciesStatus(BaseModel):
    """의존 DB별 상태 (Per-dependency health)."""

    openbank_db: HealthStatus
    security_db: HealthStatus


class DeepSystemStatusResponse(BaseModel):
    """Deep health check 응답.

    Deep health check response.

    Attributes:
        status: 종합 상태 — 모든 의존성이 UP일 때만 UP (Aggregate; UP only if every dependency is UP)
        service: 서비스 자체 상태 (The service's own liveness)
        dependencies: 의존성별 상태 (Per-dependency status)
    """

    status: HealthStatus
    service: HealthStatus
    dependencies: DependenciesStatus
