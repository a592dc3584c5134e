"""SOAP 고객 정보 라우터 — GetClientInformation 오퍼레이션.

SOAP Client Information Router — The GetClientInformation operation over
SOAP 1.1. Faults are answered with HTTP 500 as SOAP 1.1 requires.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from openbank.database import get_db
from openbank.schemas.client import ClientApi
from openbank.services.client_service import client_service
from openbank.utils.exceptions import SEVERE_SYSTEM_FAILURE
from openbank.utils.soap import SoapFaultError, parse_get_client_request, render_client_response, render_fault

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()

SOAP_MEDIA_TYPE: str = "text/xml; charset=utf-8"


@router.post("", response_class=Response)
async def soap_endpoint(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """SOAP 요청을 처리합니다.

    Handle a GetClientInformationRequest envelope. Validation and lookup
    errors from the client service are turned into ``soap:Client`` faults,
    database failures into ``soap:Server`` faults.
    """
    try:
        person_identification: str = parse_get_client_request(await request.body())
        try:
            client: ClientApi = await client_service.get_client(db, person_identification)
        except HTTPException as exc:
            raise SoapFaultError(str(exc.detail)) from exc
        except SQLAlchemyError as exc:
            logger.error("Database failure on SOAP client lookup", exc_info=exc)
            raise SoapFaultError(SEVERE_SYSTEM_FAILURE, code="soap:Server") from exc
    except SoapFaultError as fault:
        return Response(content=render_fault(fault), status_code=500, media_type=SOAP_MEDIA_TYPE)

    return Response(content=render_client_response(client), media_type=SOAP_MEDIA_TYPE)
