"""SOAP 웹 서비스 라우터 패키지.

SOAP web service Router package. Operations are served under ``/ws``.
"""

from fastapi import APIRouter

from openbank.api.ws.client_information import router as client_information_router

ws_router: APIRouter = APIRouter()

ws_router.include_router(client_information_router, prefix="/ws", tags=["SOAP"])
