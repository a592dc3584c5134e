"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schemas for the diagnostic endpoints
(hello world, date/time echo).
"""

from pydantic import BaseModel


class WorldApiResponse(BaseModel):
    """Hello world 응답 (Hello world response)."""

    message: str


class DateTime(BaseModel):
    """날짜/시간 응답 — RFC 3339 문자열 (Date time echo, RFC 3339 string)."""

    date_time: str
