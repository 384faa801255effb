"""
FastAPI 애플리케이션

라우터 등록, 예외 → {"error": ...} 응답 변환, 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from core.config.loader import get_settings
from core.constants import APP_VERSION, Messages
from core.ledger.errors import (
    LedgerError,
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.routes import (
    accounts,
    balance,
    health,
    reset,
    transactions,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema

    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db, case_sensitive_names=settings.ledger.case_sensitive_names)

    logger.info(
        f"Web: 시작 완료 (db={settings.db_path})",
        extra={
            "delete_mode": settings.ledger.delete_mode.value,
            "utc_offset_hours": settings.ledger.utc_offset_hours,
        },
    )

    yield


app = FastAPI(
    title="Conta Ledger API",
    description="계정/거래 장부 및 잔액 API",
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================================================
# 예외 처리
# =========================================================================

def _status_for(exc: LedgerError) -> int:
    """장부 예외 → HTTP 상태 코드"""
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, OperationNotAllowedError):
        return 403
    if isinstance(exc, ValidationError):
        return 400
    return 500


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """장부 예외를 {"error": message} 응답으로 변환"""
    status_code = _status_for(exc)
    logger.warning(
        f"{request.method} {request.url.path} → {status_code}: {exc.message}",
    )
    return JSONResponse(status_code=status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """요청 파싱 실패를 400 {"error": ...}로 변환"""
    errors = exc.errors()
    message = Messages.MALFORMED_REQUEST
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{message}: {location} {first.get('msg', '')}".strip()

    logger.warning(f"{request.method} {request.url.path} → 400: {message}")
    return JSONResponse(status_code=400, content={"error": message})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(transactions.router)
app.include_router(balance.router)
app.include_router(reset.router)


@app.get("/", include_in_schema=False)
async def home(request: Request):
    """홈페이지 (API 문서로 리다이렉트)"""
    return RedirectResponse(url="/docs")
