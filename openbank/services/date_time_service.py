"""날짜/시간 서비스 — RFC 3339 문자열 검증 및 에코.

Date Time Service — Validates and echoes RFC 3339 timestamps.
"""

from openbank.schemas.common import DateTime
from openbank.utils.exceptions import INVALID_DATE_TIME, BadRequestError
from openbank.utils.validators import is_rfc3339


class DateTimeService:
    def echo(self, date_time: str) -> DateTime:
        """RFC 3339 문자열을 그대로 반환합니다.

        Echo an RFC 3339 date time string back to the caller.

        Raises:
            BadRequestError: RFC 3339 형식이 아닐 때 (Not an RFC 3339 timestamp)
        """
        if not is_rfc3339(date_time):
            raise BadRequestError(INVALID_DATE_TIME)
        return DateTime(date_time=date_time)


# 싱글턴 인스턴스 — Singleton instance
date_time_service: DateTimeService = DateTimeService()
