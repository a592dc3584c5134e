"""OpenBank REST API 라우터 패키지 — 모든 REST 엔드포인트 통합.

OpenBank REST API Router package — Aggregates the REST endpoints into a
single router mounted at ``/api/openbank/v1``.

Included routers:
    - clients: 고객 조회/수정 (Client lookup and update)
    - diagnostics: hello world, 날짜/시간 에코 (Hello world, date/time echo)
    - batch: 배치 실행 및 상태 (Batch run and status)
"""

from fastapi import APIRouter

from openbank.api.rest.batch import router as batch_router
from openbank.api.rest.clients import router as clients_router
from openbank.api.rest.diagnostics import router as diagnostics_router

openbank_router: APIRouter = APIRouter()

openbank_router.include_router(clients_router, tags=["Client Information"])
openbank_router.include_router(diagnostics_router, tags=["Diagnostics"])
openbank_router.include_router(batch_router, tags=["Batch"])
