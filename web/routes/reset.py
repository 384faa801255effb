"""
초기화 라우트

GET /reset - 시나리오 테스트용 데이터 초기화
"""

from datetime import date

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from web.dependencies import get_app_settings, get_db_write, get_reference_date
from web.models.responses import ErrorResponse, ResetResponse
from web.services.reset_service import ResetService

router = APIRouter(tags=["Reset"])


@router.get(
    "/reset",
    response_model=ResetResponse,
    responses={403: {"model": ErrorResponse}},
)
async def reset_data(
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
    reference_date: date = Depends(get_reference_date),
) -> ResetResponse:
    """전체 데이터 삭제 후 초기 데이터 삽입

    ledger.allow_reset = false 이면 403.
    """
    service = ResetService(db, settings.ledger)

    return ResetResponse(**await service.reset(reference_date))
