"""배치 라우터 — 느린 모의 배치 실행 및 상태 조회.

Batch Router — Runs the slow mock batch inline or through the embedded
broker, and reports asynchronous job status.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from openbank.api.deps import get_broker
from openbank.api.responses import SYSTEM_FAILURE_RESPONSE, plain_text
from openbank.broker import EmbeddedBroker
from openbank.schemas.batch import BatchStatus
from openbank.services.batch_service import BATCH_NOT_FOUND, batch_service

router: APIRouter = APIRouter()


@router.get("/batch/status", response_model=BatchStatus, responses=SYSTEM_FAILURE_RESPONSE)
async def get_openbank_batch_status() -> BatchStatus:
    """배치를 실행하고 결과를 반환합니다.

    Run the slow mock batch within the request and return its status.
    """
    return await batch_service.run_inline()


@router.post(
    "/batch/start",
    response_model=BatchStatus,
    status_code=202,
    responses={503: plain_text("Batch queue is not available."), **SYSTEM_FAILURE_RESPONSE},
)
async def start_openbank_batch(
    broker: Annotated[EmbeddedBroker, Depends(get_broker)],
) -> BatchStatus:
    """배치 작업을 브로커 큐에 제출합니다.

    Queue a batch job on the embedded broker and return its PENDING status.
    """
    return await batch_service.submit(broker)


@router.get(
    "/batch/status/{job_id}",
    response_model=BatchStatus,
    responses={404: plain_text(BATCH_NOT_FOUND), **SYSTEM_FAILURE_RESPONSE},
)
async def get_openbank_batch_job_status(job_id: str) -> BatchStatus:
    """비동기 배치 작업 상태를 조회합니다 (Status of a queued batch job)."""
    return batch_service.get_status(job_id)
