"""입력값 검증 유틸리티 모듈.

Input validation utilities shared by schemas, services and the SOAP codec.

    - 개인 식별 번호 (Swedish personal identity number, YYYYMMDDNNNN + Luhn)
    - RFC 3339 날짜/시간 문자열 (RFC 3339 timestamps)
"""

import re
from datetime import date, datetime, timedelta, timezone

_PERSON_IDENTIFICATION = re.compile(r"^(\d{4})(\d{2})(\d{2})(\d{4})$", re.ASCII)

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(\.\d+)?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))$",
    re.ASCII,
)


def luhn_checksum_ok(digits: str) -> bool:
    """Luhn 검사 — 마지막 자리가 체크 디지트인지 확인합니다.

    Validate a digit string whose last digit is a Luhn check digit.
    Weights alternate 2, 1, 2, ... starting from the first digit of the
    10-digit short form.
    """
    total: int = 0
    for index, char in enumerate(digits[:-1]):
        product: int = int(char) * (2 if index % 2 == 0 else 1)
        total += product // 10 + product % 10
    return (10 - total % 10) % 10 == int(digits[-1])


def is_valid_person_identification(value: str | None) -> bool:
    """개인 식별 번호 유효성을 검사합니다.

    Check a 12-digit person identification number: a real calendar date
    (YYYYMMDD) followed by a 3-digit serial and a Luhn check digit computed
    over the 10-digit short form.

    Args:
        value: 검사할 문자열 (Candidate string)

    Returns:
        bool: 유효 여부 (Whether the number is valid)
    """
    if not value:
        return False

    match = _PERSON_IDENTIFICATION.fullmatch(value)
    if match is None:
        return False

    year, month, day, _ = match.groups()
    try:
        date(int(year), int(month), int(day))
    except ValueError:
        return False

    return luhn_checksum_ok(value[2:])


def parse_rfc3339(value: str) -> datetime:
    """RFC 3339 문자열을 timezone-aware datetime으로 변환합니다.

    Parse an RFC 3339 timestamp (``2019-11-01T00:00:00Z``,
    ``2019-11-01 10:15:30.25+02:00``) into an aware datetime.

    Raises:
        ValueError: 형식 또는 값 범위가 잘못된 경우 (Malformed or out of range)
    """
    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"Not an RFC 3339 date time: {value!r}")

    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = match.groups()

    if zulu:
        tz = timezone.utc
    else:
        if int(off_h) > 23 or int(off_m) > 59:
            raise ValueError(f"Invalid UTC offset: {value!r}")
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        tz = timezone(offset if sign == "+" else -offset)

    # 소수 초는 마이크로초 정밀도로 절삭 (Fractions truncated to microseconds)
    microsecond: int = int(fraction[1:7].ljust(6, "0")) if fraction else 0

    # 윤초(60)는 59초로 표현 — A leap second is represented as second 59
    second_value: int = int(second)
    if second_value == 60:
        second_value = 59

    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), second_value,
        microsecond, tzinfo=tz,
    )


def is_rfc3339(value: str) -> bool:
    try:
        parse_rfc3339(value)
    except ValueError:
        return False
    return True
