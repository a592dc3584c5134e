"""진단 API 테스트 — hello world, 날짜/시간 에코.

Diagnostics API tests — Hello world (local, remote by setting, remote by
system property) and the RFC 3339 date/time echo.
"""

import httpx
import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from openbank.config import settings
from openbank.repositories.system_property_repository import system_property_repository
from openbank.services.world_service import WORLD_API_URL_PROPERTY, world_service
from tests.conftest import API

HELLO_URL = f"{API}/get/hello/world"
DATE_TIME_URL = f"{API}/date/time"


def _world_transport(status_code: int = 200, payload: dict | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload or {"message": "Hello from the world"})

    return httpx.MockTransport(handler)


class TestHelloWorld:
    """Hello world 엔드포인트 테스트."""

    async def test_local_hello_world(self, client: AsyncClient, monkeypatch):
        """원격 서버 미설정 시 로컬 응답."""
        monkeypatch.setattr(settings, "WORLD_API_URL", "")
        res = await client.get(HELLO_URL)
        assert res.status_code == 200
        assert res.json() == {"message": "Hello world"}

    async def test_remote_by_setting(self, client: AsyncClient, monkeypatch):
        """WORLD_API_URL 설정 시 원격 서버 응답 전달."""
        monkeypatch.setattr(settings, "WORLD_API_URL", "http://world.test/hello")
        monkeypatch.setattr(world_service, "transport", _world_transport())
        res = await client.get(HELLO_URL)
        assert res.status_code == 200
        assert res.json() == {"message": "Hello from the world"}

    async def test_remote_by_system_property(
        self, client: AsyncClient, security_db: AsyncSession, monkeypatch
    ):
        """securitydb의 world.api.url 속성 사용."""
        monkeypatch.setattr(settings, "WORLD_API_URL", "")
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"message": "Hello from the property"})

        monkeypatch.setattr(world_service, "transport", httpx.MockTransport(handler))
        await system_property_repository.set_value(
            security_db, WORLD_API_URL_PROPERTY, "http://property.test/hello"
        )
        await security_db.commit()

        res = await client.get(HELLO_URL)
        assert res.status_code == 200
        assert res.json()["message"] == "Hello from the property"
        assert seen == ["http://property.test/hello"]

    async def test_remote_failure(self, client: AsyncClient, monkeypatch):
        """원격 서버 오류 시 평문 500."""
        monkeypatch.setattr(settings, "WORLD_API_URL", "http://world.test/hello")
        monkeypatch.setattr(world_service, "transport", _world_transport(status_code=503))
        res = await client.get(HELLO_URL)
        assert res.status_code == 500
        assert res.text == "Severe system failure has occured!"

    async def test_remote_bad_payload(self, client: AsyncClient, monkeypatch):
        """원격 응답 형식 오류 시 500."""
        monkeypatch.setattr(settings, "WORLD_API_URL", "http://world.test/hello")
        monkeypatch.setattr(world_service, "transport", _world_transport(payload={"greeting": "hi"}))
        res = await client.get(HELLO_URL)
        assert res.status_code == 500


class TestDateTime:
    """날짜/시간 에코 테스트."""

    @pytest.mark.parametrize(
        "value",
        [
            "2019-11-01T00:00:00Z",
            "2019-11-01T10:15:30.123456+02:00",
            "2019-11-01T10:15:30-05:30",
            "2016-12-31T23:59:60Z",
        ],
    )
    async def test_valid_date_time(self, client: AsyncClient, value):
        """유효한 RFC 3339 문자열은 그대로 반환."""
        res = await client.get(f"{DATE_TIME_URL}/{value}")
        assert res.status_code == 200
        assert res.json() == {"date_time": value}

    @pytest.mark.parametrize(
        "value",
        [
            "2019-11-01T00:00:00ZZ",
            "2019-11-01",
            "2019-13-01T00:00:00Z",
            "not-a-date",
            "\uff12\uff10\uff11\uff19-11-01T00:00:00Z",
        ],
    )
    async def test_invalid_date_time(self, client: AsyncClient, value):
        """형식 오류는 400."""
        res = await client.get(f"{DATE_TIME_URL}/{value}")
        assert res.status_code == 400
        assert res.text == "Invalid date time format."
