"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리, 라우터 등록.

FastAPI application entry point — Middleware, exception handlers and router
registration. The lifespan starts the embedded broker's listener container
and disposes both database engines on shutdown.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from openbank.broker import broker
from openbank.config import settings
from openbank.database import engine, security_engine
from openbank.middleware.axiom_logging import AxiomLoggingMiddleware
from openbank.services.batch_service import batch_service
from openbank.utils.exceptions import SEVERE_SYSTEM_FAILURE
from openbank.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

# 브로커 배선 — 배치 큐와 리스너 등록 (Broker wiring: batch queue and its listener)
broker.declare_queue(settings.BROKER_QUEUE_NAME)
broker.add_listener(settings.BROKER_QUEUE_NAME, batch_service.handle_message)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 시작/종료 처리.

    Startup: configure logging, start the broker listener container.
    Shutdown: stop the broker, dispose the database engines.
    """
    configure_logging(settings.LOG_LEVEL)
    await broker.start()
    logger.info("%s started", settings.APP_NAME)
    try:
        yield
    finally:
        await broker.stop()
        await engine.dispose()
        await security_engine.dispose()
        logger.info("%s stopped", settings.APP_NAME)


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# 예외 처리기 — 모든 오류는 평문으로 응답 (All error responses are plain text)
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """요청 검증 실패 — 라우트에 문서화된 400 메시지로 응답.

    Answer validation failures with the 400 message documented on the
    matched route, e.g. "ClientApi payload contains bad content."
    """
    route = request.scope.get("route")
    responses: dict = getattr(route, "responses", None) or {}
    message: str = responses.get(400, {}).get("description", "Bad request.")
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(message, status_code=400)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
    logger.error("Database failure on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(SEVERE_SYSTEM_FAILURE, status_code=500)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Unhandled failure on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(SEVERE_SYSTEM_FAILURE, status_code=500)


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
# openbank_router: 고객/진단/배치 REST (Client, diagnostics and batch REST endpoints)
# actuator_router: 헬스 체크 (Liveness and deep health)
# ws_router: SOAP 고객 조회 (SOAP client lookup)
from openbank.api.rest import openbank_router  # noqa: E402
from openbank.api.actuator import actuator_router  # noqa: E402
from openbank.api.ws import ws_router  # noqa: E402

app.include_router(openbank_router, prefix="/api/openbank/v1")
app.include_router(actuator_router, prefix="/actuator")
app.include_router(ws_router)
