"""입력값 검증 유틸리티 테스트.

Validator tests — Person identification numbers and RFC 3339 timestamps.
"""

from datetime import timedelta, timezone

import pytest

from openbank.utils.validators import is_rfc3339, is_valid_person_identification, parse_rfc3339


class TestPersonIdentification:
    @pytest.mark.parametrize("value", ["191212121212", "198112189876", "197010101231"])
    def test_valid(self, value):
        assert is_valid_person_identification(value)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "1912121212",       # 10자리 (short form)
            "191212121213",     # 체크 디지트 오류 (bad check digit)
            "191302301212",     # 존재하지 않는 날짜 (no such date)
            "19121212121a",
            "191212121212\n",
            "\u0661\u0669\u0661\u0662\u0661\u0662\u0661\u0662\u0661\u0662\u0661\u0662",  # 비ASCII 숫자 (non-ASCII digits)
        ],
    )
    def test_invalid(self, value):
        assert not is_valid_person_identification(value)


class TestRfc3339:
    def test_parse_utc(self):
        parsed = parse_rfc3339("2019-11-01T00:00:00Z")
        assert parsed.tzinfo == timezone.utc
        assert (parsed.year, parsed.month, parsed.day) == (2019, 11, 1)

    def test_parse_offset_and_fraction(self):
        parsed = parse_rfc3339("2019-11-01T10:15:30.1234567-05:30")
        assert parsed.utcoffset() == -timedelta(hours=5, minutes=30)
        assert parsed.microsecond == 123456

    @pytest.mark.parametrize(
        "value",
        [
            "2019-11-01T00:00:00ZZ",
            "2019-11-01T00:00:00",
            "2019-02-30T00:00:00Z",
            "2019-11-01T24:00:00Z",
            "2019-11-01T00:00:00+24:00",
        ],
    )
    def test_invalid(self, value):
        assert not is_rfc3339(value)

    def test_leap_second(self):
        parsed = parse_rfc3339("2016-12-31T23:59:60Z")
        assert (parsed.hour, parsed.minute, parsed.second) == (23, 59, 59)

    def test_rejects_second_61(self):
        assert not is_rfc3339("2016-12-31T23:59:61Z")

    def test_rejects_non_ascii_digits(self):
        assert not is_rfc3339("２０１９-11-01T00:00:00Z")
