"""
계정 라우트

계정 생성/조회/이름 변경/삭제 API
"""

from fastapi import APIRouter, Depends, Path, Query, Response

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from core.constants import MAX_ROW_ID
from web.dependencies import get_app_settings, get_db, get_db_write
from web.models.requests import AccountRequest
from web.models.responses import AccountResponse, ErrorResponse
from web.services.account_service import AccountService

router = APIRouter(prefix="/contas", tags=["Accounts"])


@router.post(
    "",
    status_code=201,
    response_model=AccountResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_account(
    request: AccountRequest,
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
) -> AccountResponse:
    """계정 생성

    같은 이름의 계정이 있으면 400
    `{"error": "Já existe uma conta com esse nome!"}`.
    """
    service = AccountService(db, settings.ledger)

    account = await service.create_account(request.nome)

    return AccountResponse(**account)


@router.get("", response_model=list[AccountResponse])
async def get_accounts(
    nome: str | None = Query(default=None, description="계정명 필터"),
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> list[AccountResponse]:
    """계정 목록 조회"""
    service = AccountService(db, settings.ledger)

    accounts = await service.get_accounts(nome)

    return [AccountResponse(**a) for a in accounts]


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_account(
    account_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="계정 ID"),
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AccountResponse:
    """계정 조회"""
    service = AccountService(db, settings.ledger)

    return AccountResponse(**await service.get_account(account_id))


@router.put(
    "/{account_id}",
    response_model=AccountResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def rename_account(
    request: AccountRequest,
    account_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="계정 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
) -> AccountResponse:
    """계정 이름 변경"""
    service = AccountService(db, settings.ledger)

    account = await service.rename_account(account_id, request.nome)

    return AccountResponse(**account)


@router.delete(
    "/{account_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_account(
    account_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="계정 ID"),
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """계정 삭제 (연결된 거래가 있으면 400)"""
    service = AccountService(db, settings.ledger)

    await service.delete_account(account_id)

    return Response(status_code=204)
