"""Axiom 로깅 미들웨어 마스킹 테스트.

Axiom logging middleware tests — Masking of sensitive body fields and of
person identification numbers in request paths.
"""

from openbank.middleware.axiom_logging import mask_dict, mask_path


class TestMasking:
    def test_mask_nested_person(self):
        """중첩된 개인 정보 필드 마스킹."""
        body = {
            "client": {
                "person": {
                    "person_identification": "191212121212",
                    "first_name": "John",
                    "mail": "john.doe@test.se",
                },
                "client_type": {"type": "REGULAR", "rating": 500},
            }
        }
        masked = mask_dict(body)
        person = masked["client"]["person"]
        assert person["person_identification"] == "***"
        assert person["mail"] == "***"
        assert person["first_name"] == "John"
        assert masked["client"]["client_type"] == {"type": "REGULAR", "rating": 500}

    def test_mask_list_truncated(self):
        """리스트는 최대 20개 항목."""
        assert len(mask_dict(list(range(50)))) == 20

    def test_mask_path(self):
        """경로의 12자리 식별 번호 마스킹."""
        assert mask_path("/api/openbank/v1/client/info/191212121212") == "/api/openbank/v1/client/info/************"

    def test_mask_path_leaves_other_numbers(self):
        """12자리가 아닌 숫자는 유지."""
        assert mask_path("/api/openbank/v1/batch/status/12345") == "/api/openbank/v1/batch/status/12345"

    def test_mask_path_ascii_digits_only(self):
        """비ASCII 숫자는 식별 번호로 취급하지 않음."""
        path = "/api/openbank/v1/client/info/١٩١٢١٢١٢١٢١٢"
        assert mask_path(path) == path
