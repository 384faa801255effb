"""
거래 라우트

거래 생성/조회/수정/삭제 API
"""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query, Response

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from core.constants import MAX_ROW_ID
from web.dependencies import get_app_settings, get_db, get_db_write, get_reference_date
from web.models.requests import TransactionRequest
from web.models.responses import ErrorResponse, TransactionResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/transacoes", tags=["Transactions"])


@router.post(
    "",
    status_code=201,
    response_model=TransactionResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_transaction(
    request: TransactionRequest,
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
    reference_date: date = Depends(get_reference_date),
) -> TransactionResponse:
    """거래 생성

    valor는 "32.99" 형식 문자열로 반환.
    """
    service = TransactionService(db, settings.ledger)

    transaction = await service.create_transaction(request.to_input(), reference_date)

    return TransactionResponse(**transaction)


@router.get("", response_model=list[TransactionResponse])
async def get_transactions(
    descricao: str | None = Query(default=None, description="설명 필터 (정확히 일치)"),
    conta_id: int | None = Query(default=None, ge=1, le=MAX_ROW_ID, description="계정 필터"),
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> list[TransactionResponse]:
    """거래 목록 조회 (등록 순)"""
    service = TransactionService(db, settings.ledger)

    transactions = await service.get_transactions(descricao, conta_id)

    return [TransactionResponse(**t) for t in transactions]


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_transaction(
    transaction_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="거래 ID"),
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> TransactionResponse:
    """거래 조회"""
    service = TransactionService(db, settings.ledger)

    return TransactionResponse(**await service.get_transaction(transaction_id))


@router.put(
    "/{transaction_id}",
    response_model=TransactionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_transaction(
    request: TransactionRequest,
    transaction_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="거래 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
    reference_date: date = Depends(get_reference_date),
) -> TransactionResponse:
    """거래 수정

    전체 또는 일부 필드 전달 가능 (빠진 필드는 기존 값 유지).
    """
    service = TransactionService(db, settings.ledger)

    transaction = await service.update_transaction(
        transaction_id,
        request.to_input(),
        reference_date,
    )

    return TransactionResponse(**transaction)


@router.delete(
    "/{transaction_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
async def delete_transaction(
    transaction_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="거래 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
    reference_date: date = Depends(get_reference_date),
) -> Response:
    """거래 삭제 (빈 본문 204)"""
    service = TransactionService(db, settings.ledger)

    await service.delete_transaction(transaction_id, reference_date)

    return Response(status_code=204)
