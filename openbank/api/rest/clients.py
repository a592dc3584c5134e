"""고객 정보 라우터 — 고객 조회 및 수정 엔드포인트.

Client Information Router — Client lookup and update endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from openbank.api.responses import SYSTEM_FAILURE_RESPONSE, plain_text
from openbank.database import get_db
from openbank.schemas.client import (
    ClientApi,
    ClientInformationRequest,
    ClientInformationResponse,
    ClientRequest,
)
from openbank.services.client_service import client_service
from openbank.utils.exceptions import (
    BAD_CLIENT_CONTENT,
    CLIENT_NOT_FOUND,
    INVALID_PERSON_IDENTIFICATION,
)

router: APIRouter = APIRouter()

_LOOKUP_RESPONSES = {
    400: plain_text(INVALID_PERSON_IDENTIFICATION),
    404: plain_text(CLIENT_NOT_FOUND),
    **SYSTEM_FAILURE_RESPONSE,
}


@router.put(
    "/update/client/information",
    response_model=ClientInformationResponse,
    summary="Update client information.",
    responses={
        400: plain_text(BAD_CLIENT_CONTENT),
        404: plain_text(CLIENT_NOT_FOUND),
        **SYSTEM_FAILURE_RESPONSE,
    },
)
async def update_client_information(
    data: ClientInformationRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ClientInformationResponse:
    """고객 정보를 수정합니다.

    Update the client information with constraint validation of the
    ClientApi payload.
    """
    result: ClientInformationResponse = await client_service.update_client_information(db, data)
    await db.commit()
    return result


@router.get(
    "/client/info/{person_identification}",
    response_model=ClientApi,
    summary="Get client by person identification number",
    responses=_LOOKUP_RESPONSES,
)
async def get_client_information(
    person_identification: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ClientApi:
    """개인 식별 번호로 고객을 조회합니다.

    Get the client with the unique person identification number given as
    path parameter, e.g. ``191212121212``.
    """
    return await client_service.get_client(db, person_identification)


@router.get(
    "/get/client/info/",
    response_model=ClientApi,
    summary="Get client by client request body",
    responses=_LOOKUP_RESPONSES,
)
async def get_client_information_by_request_body(
    data: ClientRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ClientApi:
    """요청 본문의 개인 식별 번호로 고객을 조회합니다.

    Get the client with the unique person identification number given as
    part of the request body.
    """
    return await client_service.get_client(db, data.person_identification)
