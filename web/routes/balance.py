"""
잔액 라우트

GET /saldo - 계정별 잔액
"""

from datetime import date

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db_write, get_reference_date
from web.models.responses import BalanceResponse
from web.services.balance_service import BalanceService

router = APIRouter(tags=["Balance"])


@router.get("/saldo", response_model=list[BalanceResponse])
async def get_balances(
    db: SQLiteAdapter = Depends(get_db_write),
    reference_date: date = Depends(get_reference_date),
) -> list[BalanceResponse]:
    """계정별 잔액 조회

    settled 이고 지급일이 오늘 이전인 거래만 합산.
    """
    service = BalanceService(db)

    balances = await service.get_balances(reference_date)

    return [BalanceResponse(**b) for b in balances]
