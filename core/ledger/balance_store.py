"""
잔액 저장소

account_balance Projection 관리.
- 거래 생성/수정/삭제 시 같은 DB 트랜잭션 안에서 재계산
- 조회 시 as_of(계산 기준일)가 요청 기준일과 다르면 재계산
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from core.ledger.balance import compute_balance, format_money
from core.ledger.types import AccountBalance, TransactionKind
from core.utils.dates import format_day

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _BalanceRow:
    kind: TransactionKind
    settled: bool
    amount: Decimal
    payment_date: date


class BalanceStore:
    """잔액 저장소

    계정별 잔액 Projection을 재계산하고 조회하는 클래스.
    재계산은 항상 거래 원본에서 다시 합산 (증분 갱신 없음).

    Args:
        db: SQLite 어댑터 (쓰기 가능)
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def recompute(self, account_id: int, reference_date: date) -> Decimal:
        """계정 잔액 재계산 후 Projection 저장

        호출자의 트랜잭션 안에서 실행 (자체 커밋 없음).

        Args:
            account_id: 계정 ID
            reference_date: 기준일

        Returns:
            재계산된 잔액
        """
        rows = await self.db.fetchall(
            """
            SELECT kind, settled, amount, payment_date
            FROM ledger_transaction
            WHERE account_id = ? AND deleted_at IS NULL
            """,
            (account_id,),
        )

        items = [
            _BalanceRow(
                kind=TransactionKind(row[0]),
                settled=bool(row[1]),
                amount=Decimal(row[2]),
                payment_date=date.fromisoformat(row[3]),
            )
            for row in rows
        ]

        balance = compute_balance(items, reference_date)

        # Upsert
        await self.db.execute(
            """
            INSERT INTO account_balance (account_id, balance, as_of)
            VALUES (?, ?, ?)
            ON CONFLICT(account_id) DO UPDATE SET
                balance = excluded.balance,
                as_of = excluded.as_of,
                updated_at = datetime('now')
            """,
            (account_id, format_money(balance), format_day(reference_date)),
        )

        logger.debug(
            f"Balance recomputed: account={account_id} balance={format_money(balance)}",
            extra={"as_of": format_day(reference_date), "transactions": len(items)},
        )

        return balance

    async def get_balances(self, reference_date: date) -> list[AccountBalance]:
        """전체 계정 잔액 조회

        Projection이 없거나 다른 기준일로 계산된 계정은 재계산.
        (결제일이 도래한 settled 거래가 날짜 경과만으로 반영되도록)

        Args:
            reference_date: 기준일

        Returns:
            계정 ID 순 AccountBalance 목록
        """
        rows = await self.db.fetchall(
            """
            SELECT a.id, a.name, b.balance, b.as_of
            FROM account a
            LEFT JOIN account_balance b ON b.account_id = a.id
            WHERE a.deleted_at IS NULL
            ORDER BY a.id
            """
        )

        as_of = format_day(reference_date)
        stale_ids = [row[0] for row in rows if row[3] != as_of]

        refreshed: dict[int, Decimal] = {}
        if stale_ids:
            async with self.db.transaction(immediate=True):
                for account_id in stale_ids:
                    refreshed[account_id] = await self.recompute(account_id, reference_date)

            logger.info(
                f"Stale balances refreshed: {len(stale_ids)} account(s)",
                extra={"as_of": as_of},
            )

        return [
            AccountBalance(
                account_id=row[0],
                account_name=row[1],
                balance=refreshed[row[0]] if row[0] in refreshed else Decimal(row[2]),
                as_of=reference_date,
            )
            for row in rows
        ]

    async def get_balance(self, account_id: int, reference_date: date) -> Decimal | None:
        """단일 계정 잔액 조회 (계정이 없으면 None)"""
        for item in await self.get_balances(reference_date):
            if item.account_id == account_id:
                return item.balance
        return None
