"""
잔액 서비스

BalanceStore 기반 계정별 잔액 조회
"""

from datetime import date
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.balance import format_money
from core.ledger.balance_store import BalanceStore


class BalanceService:
    """잔액 서비스

    Args:
        db: SQLite 어댑터 (쓰기 가능, Projection 갱신)
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.balance_store = BalanceStore(db)

    async def get_balances(self, reference_date: date) -> list[dict[str, Any]]:
        """전체 계정 잔액 조회

        Returns:
            [{conta_id, conta, saldo}] (saldo는 "534.00" 형식)
        """
        balances = await self.balance_store.get_balances(reference_date)
        return [
            {
                "conta_id": item.account_id,
                "conta": item.account_name,
                "saldo": format_money(item.balance),
            }
            for item in balances
        ]
