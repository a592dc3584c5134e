"""액추에이터 라우터 패키지 — 운영 모니터링 엔드포인트.

Actuator Router package — Operational monitoring endpoints mounted at
``/actuator``.
"""

from fastapi import APIRouter

from openbank.api.actuator.health import router as health_router

actuator_router: APIRouter = APIRouter()

actuator_router.include_router(health_router, tags=["Actuator"])
