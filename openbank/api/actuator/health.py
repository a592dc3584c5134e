"""액추에이터 헬스 라우터 — 얕은/깊은 헬스 체크.

Actuator Health Router — Shallow liveness and deep health check endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from openbank.api.deps import get_health_probes
from openbank.schemas.health import DeepSystemStatusResponse, HealthStatus
from openbank.services.health_service import deep_health_service

router: APIRouter = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Liveness endpoint for load balancers; does not touch the databases.
    """
    return {"status": HealthStatus.UP.value}


@router.get("/deephealth", response_model=DeepSystemStatusResponse)
async def deep_health_check(
    probes: Annotated[dict[str, AsyncEngine], Depends(get_health_probes)],
) -> DeepSystemStatusResponse:
    """의존 DB를 포함한 종합 상태를 반환합니다.

    Aggregate health of the service and its databases. Always answers 200;
    the body carries the UP/DOWN verdicts.
    """
    return await deep_health_service.check(probes)
