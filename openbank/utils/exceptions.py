"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services and repositories by
eliminating the need to specify status codes at each call site.
Responses are rendered as plain text by the handlers in ``openbank.main``.

Usage:
    from openbank.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Client not found.")
    raise BadRequestError(INVALID_PERSON_IDENTIFICATION)
"""

from fastapi import HTTPException, status

# 고정 오류 메시지 — Fixed plain-text error messages
INVALID_PERSON_IDENTIFICATION: str = "Invalid personal identification number."
CLIENT_NOT_FOUND: str = "Client not found."
BAD_CLIENT_CONTENT: str = "ClientApi payload contains bad content."
INVALID_DATE_TIME: str = "Invalid date time format."
SEVERE_SYSTEM_FAILURE: str = "Severe system failure has occured!"


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (client, batch job) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found.")
    """

    def __init__(self, detail: str = "Resource not found.") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. malformed person identification in a path parameter).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request.")
    """

    def __init__(self, detail: str = "Bad request.") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class SystemFailureError(HTTPException):
    """500 Internal Server Error 예외 — 하위 시스템 실패 시 사용.

    500 exception raised when a downstream dependency (remote world server,
    database) fails in a way the caller cannot fix.
    """

    def __init__(self, detail: str = SEVERE_SYSTEM_FAILURE) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class ServiceUnavailableError(HTTPException):
    """503 Service Unavailable 예외 — 내장 브로커가 동작하지 않을 때 사용.

    503 exception raised when the embedded broker is not accepting messages.
    """

    def __init__(self, detail: str = "Service unavailable.") -> None:
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
