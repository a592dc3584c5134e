"""Hello world 서비스 — 원격 World 서버 호출.

Hello World Service — Answers the diagnostic hello world call, either
locally or by asking a remote world server over HTTP.

The remote location comes from ``WORLD_API_URL`` or, when that is empty,
from the ``world.api.url`` system property in securitydb.
"""

import logging

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from openbank.config import settings
from openbank.repositories.system_property_repository import system_property_repository
from openbank.schemas.common import WorldApiResponse
from openbank.utils.exceptions import SystemFailureError

logger = logging.getLogger(__name__)

HELLO_WORLD: str = "Hello world"
WORLD_API_URL_PROPERTY: str = "world.api.url"


class WorldService:
    """Hello world 응답을 생성하는 서비스.

    Service producing the hello world response.

    Attributes:
        transport: httpx 전송 계층, 테스트에서 교체 가능 (httpx transport; replaceable in tests)
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.transport: httpx.AsyncBaseTransport | None = transport

    async def resolve_url(self, security_db: AsyncSession) -> str | None:
        if settings.WORLD_API_URL:
            return settings.WORLD_API_URL
        return await system_property_repository.get_value(security_db, WORLD_API_URL_PROPERTY)

    async def get_hello_world(self, security_db: AsyncSession) -> WorldApiResponse:
        """Hello world 메시지를 반환합니다.

        Return the hello world message. Without a configured remote server the
        answer is produced locally.

        Raises:
            SystemFailureError: 원격 서버 호출 실패 (Remote server unreachable or answered with an error)
        """
        url: str | None = await self.resolve_url(security_db)
        if not url:
            return WorldApiResponse(message=HELLO_WORLD)

        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=settings.WORLD_API_TIMEOUT_SECONDS,
            ) as http:
                response: httpx.Response = await http.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                return WorldApiResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Remote world server call to %s failed: %s", url, exc)
            raise SystemFailureError() from exc


# 싱글턴 인스턴스 — Singleton instance
world_service: WorldService = WorldService()
