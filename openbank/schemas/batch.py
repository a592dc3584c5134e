"""배치 상태 스키마 정의.

Batch status schema definitions.
"""

from enum import Enum

from pydantic import BaseModel


class Status(str, Enum):
    """배치 작업 상태 (Batch job status)."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    PENDING = "PENDING"


class BatchStatus(BaseModel):
    """배치 상태 응답.

    Batch status response.

    Attributes:
        status: 작업 상태 (Job status)
        message: 결과 메시지 (Outcome message)
        job_id: 비동기 작업 ID, 인라인 실행 시 None (Async job id; None for inline runs)
    """

    status: Status
    message: str
    job_id: str | None = None
