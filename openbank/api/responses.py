"""OpenAPI 오류 응답 문서 헬퍼.

OpenAPI error response helpers. Each route documents its plain-text error
responses here; the request validation handler in ``openbank.main`` reuses
the documented 400 description as the response body.
"""

from typing import Any

from openbank.utils.exceptions import SEVERE_SYSTEM_FAILURE


def plain_text(description: str) -> dict[str, Any]:
    """평문 오류 응답 문서 (Plain-text error response documentation)."""
    return {
        "description": description,
        "content": {"text/plain": {"schema": {"type": "string", "example": description}}},
    }


# 모든 라우트 공통 500 응답 — 500 response shared by every route
SYSTEM_FAILURE_RESPONSE: dict[int | str, dict[str, Any]] = {500: plain_text(SEVERE_SYSTEM_FAILURE)}
