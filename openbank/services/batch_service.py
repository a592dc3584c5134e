"""배치 서비스 — 느린 모의 배치와 비동기 작업 상태 추적.

Batch Service — The slow mock batch, its inline run, and asynchronous runs
handed off through the embedded broker with per-job status tracking.

Flow (async):
    1. POST /batch/start → 작업 등록(PENDING) 후 브로커 큐에 메시지 전송
       (Job registered as PENDING, message sent to the broker queue)
    2. 리스너가 메시지를 받아 배치를 실행 (Listener receives it and runs the batch)
    3. 결과(SUCCESS/FAILED)를 추적기에 기록 (Outcome recorded in the tracker)
"""

import asyncio
import logging
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any

from openbank.broker import BrokerError, EmbeddedBroker
from openbank.config import settings
from openbank.schemas.batch import BatchStatus, Status
from openbank.utils.exceptions import NotFoundError, ServiceUnavailableError

logger = logging.getLogger(__name__)

BATCH_SUCCESS: str = "Batch job went just fine."
BATCH_FAILED: str = "Batch job failed."
BATCH_PENDING: str = "Batch job has been queued."
BATCH_NOT_FOUND: str = "Batch job not found."


class SlowMockBatch:
    """지연을 시뮬레이션하는 모의 배치.

    Mock batch simulating a slow job by sleeping ``sleep_time`` seconds.

    Attributes:
        sleep_time: 지연 시간(초) (Simulated latency in seconds)
    """

    def __init__(self, sleep_time: int) -> None:
        self.sleep_time: int = sleep_time

    async def start_batch(self) -> BatchStatus:
        await asyncio.sleep(self.sleep_time)
        return BatchStatus(status=Status.SUCCESS, message=BATCH_SUCCESS)


class BatchStatusTracker:
    """비동기 배치 작업 상태 저장소.

    In-memory store of asynchronous batch job statuses. Keeps at most
    ``max_jobs`` entries, evicting the oldest first.
    """

    def __init__(self, max_jobs: int = 1000) -> None:
        self.max_jobs: int = max_jobs
        self._jobs: OrderedDict[str, BatchStatus] = OrderedDict()

    def register(self, job_id: str) -> BatchStatus:
        status = BatchStatus(status=Status.PENDING, message=BATCH_PENDING, job_id=job_id)
        self._jobs[job_id] = status
        while len(self._jobs) > self.max_jobs:
            self._jobs.popitem(last=False)
        return status

    def complete(self, job_id: str, result: BatchStatus) -> None:
        if job_id not in self._jobs:
            logger.warning("Completed batch job %s is no longer tracked", job_id)
            return
        self._jobs[job_id] = result.model_copy(update={"job_id": job_id})

    def discard(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)

    def get(self, job_id: str) -> BatchStatus | None:
        return self._jobs.get(job_id)


class BatchService:
    """배치 실행 및 상태 조회 서비스.

    Service running the slow mock batch inline or through the broker.

    Attributes:
        batch: 실행할 모의 배치 (Mock batch to run)
        tracker: 비동기 작업 상태 저장소 (Async job status tracker)
        queue_name: 브로커 큐 이름 (Broker queue carrying batch jobs)
    """

    def __init__(self, batch: SlowMockBatch, tracker: BatchStatusTracker, queue_name: str) -> None:
        self.batch: SlowMockBatch = batch
        self.tracker: BatchStatusTracker = tracker
        self.queue_name: str = queue_name

    async def run_inline(self) -> BatchStatus:
        """배치를 요청 처리 중에 실행합니다 (Run the batch within the request)."""
        return await self.batch.start_batch()

    async def submit(self, broker: EmbeddedBroker) -> BatchStatus:
        """배치 작업을 브로커 큐에 제출합니다.

        Register a new job as PENDING and send it to the broker queue.

        Raises:
            ServiceUnavailableError: 브로커가 메시지를 받지 못할 때 (Broker rejected the message)
        """
        job_id: str = str(uuid.uuid4())
        status: BatchStatus = self.tracker.register(job_id)
        try:
            await broker.send(
                self.queue_name,
                {"job_id": job_id, "submitted_at": datetime.now(timezone.utc).isoformat()},
            )
        except BrokerError as exc:
            self.tracker.discard(job_id)
            logger.error("Could not queue batch job %s: %s", job_id, exc)
            raise ServiceUnavailableError("Batch queue is not available.") from exc

        logger.info("Queued batch job %s on %s", job_id, self.queue_name)
        return status

    def get_status(self, job_id: str) -> BatchStatus:
        """작업 상태를 조회합니다.

        Raises:
            NotFoundError: 알 수 없는 작업 ID (Unknown job id)
        """
        status: BatchStatus | None = self.tracker.get(job_id)
        if status is None:
            raise NotFoundError(BATCH_NOT_FOUND)
        return status

    async def handle_message(self, message: dict[str, Any]) -> None:
        """브로커 리스너 — 배치를 실행하고 결과를 기록합니다.

        Broker listener: run the batch for the job in ``message`` and record
        its outcome. A failing batch, or one cancelled by a broker stop, is
        recorded as FAILED.
        """
        job_id: str = message["job_id"]
        logger.info("Running batch job %s", job_id)
        try:
            result: BatchStatus = await self.batch.start_batch()
        except asyncio.CancelledError:
            logger.warning("Batch job %s cancelled before completion", job_id)
            self.tracker.complete(job_id, BatchStatus(status=Status.FAILED, message=BATCH_FAILED))
            raise
        except Exception:
            logger.exception("Batch job %s failed", job_id)
            result = BatchStatus(status=Status.FAILED, message=BATCH_FAILED)
        self.tracker.complete(job_id, result)


# 싱글턴 인스턴스 — Singleton instances
slow_mock_batch: SlowMockBatch = SlowMockBatch(settings.BATCH_SLEEP_SECONDS)
batch_service: BatchService = BatchService(slow_mock_batch, BatchStatusTracker(), settings.BROKER_QUEUE_NAME)
