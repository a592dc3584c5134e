"""진단 라우터 — hello world 및 날짜/시간 에코.

Diagnostics Router — Hello world and date/time echo endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from openbank.api.responses import SYSTEM_FAILURE_RESPONSE, plain_text
from openbank.database import get_security_db
from openbank.schemas.common import DateTime, WorldApiResponse
from openbank.services.date_time_service import date_time_service
from openbank.services.world_service import world_service
from openbank.utils.exceptions import INVALID_DATE_TIME

router: APIRouter = APIRouter()


@router.get(
    "/get/hello/world",
    response_model=WorldApiResponse,
    summary="Get hello world by the remote http server",
    responses=SYSTEM_FAILURE_RESPONSE,
)
async def get_hello_world(
    security_db: Annotated[AsyncSession, Depends(get_security_db)],
) -> WorldApiResponse:
    """Hello world 메시지를 조회합니다.

    Get the hello world message, from the remote world server when one is
    configured.
    """
    return await world_service.get_hello_world(security_db)


@router.get(
    "/date/time/{date_time}",
    response_model=DateTime,
    summary="Get date time",
    responses={400: plain_text(INVALID_DATE_TIME), **SYSTEM_FAILURE_RESPONSE},
)
async def get_date_time(date_time: str) -> DateTime:
    """RFC 3339 날짜/시간 문자열을 에코합니다.

    Echo the RFC 3339 date time string, e.g. ``2019-11-01T00:00:00Z``.
    """
    return date_time_service.echo(date_time)
