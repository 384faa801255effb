"""
거래 저장소

거래 생성/수정/삭제/조회.
변경은 BEGIN IMMEDIATE 트랜잭션 안에서 잔액 재계산까지 함께 커밋.
"""

from __future__ import annotations

import logging
from datetime import date, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from core.constants import Messages
from core.ledger.balance import affects_balance, format_money
from core.ledger.balance_store import BalanceStore
from core.ledger.errors import NotFoundError, ValidationError
from core.ledger.types import Transaction, TransactionFields, TransactionInput, TransactionKind
from core.ledger.validation import validate_transaction
from core.types import DeleteMode
from core.utils.dates import format_day

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)

TRANSACTION_COLUMNS = """
    id, account_id, kind, settled, description, amount,
    counterparty, transaction_date, payment_date
"""


def _row_to_transaction(row: tuple[Any, ...]) -> Transaction:
    return Transaction(
        id=row[0],
        account_id=row[1],
        kind=TransactionKind(row[2]),
        settled=bool(row[3]),
        description=row[4],
        amount=Decimal(row[5]),
        counterparty=row[6],
        transaction_date=date.fromisoformat(row[7]),
        payment_date=date.fromisoformat(row[8]),
    )


def _with_id(transaction_id: int, fields: TransactionFields) -> Transaction:
    return Transaction(
        id=transaction_id,
        account_id=fields.account_id,
        kind=fields.kind,
        settled=fields.settled,
        description=fields.description,
        amount=fields.amount,
        counterparty=fields.counterparty,
        transaction_date=fields.transaction_date,
        payment_date=fields.payment_date,
    )


class TransactionStore:
    """거래 저장소

    Args:
        db: SQLite 어댑터
        delete_mode: 삭제 방식 (hard/soft)
        tz: 장부 타임존 (ISO datetime 입력의 날짜 계산용)
    """

    def __init__(
        self,
        db: SQLiteAdapter,
        delete_mode: DeleteMode = DeleteMode.HARD,
        tz: timezone | None = None,
    ):
        self.db = db
        self.delete_mode = delete_mode
        self.tz = tz
        self.balances = BalanceStore(db)

    async def _ensure_account(self, account_id: int) -> None:
        row = await self.db.fetchone(
            "SELECT 1 FROM account WHERE id = ? AND deleted_at IS NULL",
            (account_id,),
        )
        if row is None:
            raise ValidationError(Messages.ACCOUNT_INVALID)

    async def _fetch(self, transaction_id: int) -> Transaction:
        row = await self.db.fetchone(
            f"""
            SELECT {TRANSACTION_COLUMNS}
            FROM ledger_transaction
            WHERE id = ? AND deleted_at IS NULL
            """,
            (transaction_id,),
        )
        if row is None:
            raise NotFoundError(Messages.TRANSACTION_NOT_FOUND)
        return _row_to_transaction(row)

    async def create(self, data: TransactionInput, reference_date: date) -> Transaction:
        """거래 생성

        Args:
            data: 원본 입력
            reference_date: 잔액 재계산 기준일

        Returns:
            저장된 Transaction

        Raises:
            ValidationError: 입력 검증 실패 또는 존재하지 않는 계정
        """
        fields = validate_transaction(data, self.tz)

        async with self.db.transaction(immediate=True):
            await self._ensure_account(fields.account_id)

            cursor = await self.db.execute(
                """
                INSERT INTO ledger_transaction (
                    account_id, kind, settled, description, amount,
                    counterparty, transaction_date, payment_date
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    fields.account_id,
                    fields.kind.value,
                    int(fields.settled),
                    fields.description,
                    format_money(fields.amount),
                    fields.counterparty,
                    format_day(fields.transaction_date),
                    format_day(fields.payment_date),
                ),
            )
            transaction = _with_id(cursor.lastrowid, fields)

            await self.balances.recompute(fields.account_id, reference_date)

        logger.info(
            f"Transaction created: id={transaction.id} account={transaction.account_id} "
            f"{transaction.kind.value} {format_money(transaction.amount)}",
            extra={"settled": transaction.settled},
        )
        return transaction

    async def get(self, transaction_id: int) -> Transaction:
        """거래 조회

        Raises:
            NotFoundError: 거래 없음
        """
        return await self._fetch(transaction_id)

    async def update(
        self,
        transaction_id: int,
        patch: TransactionInput,
        reference_date: date,
    ) -> Transaction:
        """거래 수정 (전체 또는 부분)

        None 필드는 기존 값 유지.
        잔액 관련 필드가 바뀌면 변경 전/후 계정 모두 재계산.

        Raises:
            NotFoundError: 거래 없음
            ValidationError: 병합 결과 검증 실패
        """
        async with self.db.transaction(immediate=True):
            current = await self._fetch(transaction_id)
            fields = validate_transaction(patch.merged_over(current), self.tz)

            if fields.account_id != current.account_id:
                await self._ensure_account(fields.account_id)

            await self.db.execute(
                """
                UPDATE ledger_transaction
                SET account_id = ?, kind = ?, settled = ?, description = ?,
                    amount = ?, counterparty = ?, transaction_date = ?,
                    payment_date = ?, updated_at = datetime('now')
                WHERE id = ?
                """,
                (
                    fields.account_id,
                    fields.kind.value,
                    int(fields.settled),
                    fields.description,
                    format_money(fields.amount),
                    fields.counterparty,
                    format_day(fields.transaction_date),
                    format_day(fields.payment_date),
                    transaction_id,
                ),
            )
            updated = _with_id(transaction_id, fields)

            if affects_balance(current, updated):
                await self.balances.recompute(current.account_id, reference_date)
                if updated.account_id != current.account_id:
                    await self.balances.recompute(updated.account_id, reference_date)

        logger.info(
            f"Transaction updated: id={transaction_id} account={updated.account_id}",
            extra={"settled": updated.settled},
        )
        return updated

    async def delete(self, transaction_id: int, reference_date: date) -> None:
        """거래 삭제 후 소속 계정 잔액 재계산

        Raises:
            NotFoundError: 거래 없음
        """
        async with self.db.transaction(immediate=True):
            current = await self._fetch(transaction_id)

            if self.delete_mode == DeleteMode.SOFT:
                await self.db.execute(
                    """
                    UPDATE ledger_transaction
                    SET deleted_at = datetime('now'), updated_at = datetime('now')
                    WHERE id = ?
                    """,
                    (transaction_id,),
                )
            else:
                await self.db.execute(
                    "DELETE FROM ledger_transaction WHERE id = ?",
                    (transaction_id,),
                )

            await self.balances.recompute(current.account_id, reference_date)

        logger.info(
            f"Transaction deleted: id={transaction_id} account={current.account_id}",
            extra={"delete_mode": self.delete_mode.value},
        )

    async def list_transactions(
        self,
        description: str | None = None,
        account_id: int | None = None,
    ) -> list[Transaction]:
        """거래 목록 조회 (등록 순)

        Args:
            description: 설명 필터 (정확히 일치)
            account_id: 계정 필터
        """
        sql = f"SELECT {TRANSACTION_COLUMNS} FROM ledger_transaction WHERE deleted_at IS NULL"
        params: list[Any] = []
        if description is not None:
            sql += " AND description = ?"
            params.append(description)
        if account_id is not None:
            sql += " AND account_id = ?"
            params.append(account_id)
        sql += " ORDER BY id"

        rows = await self.db.fetchall(sql, tuple(params))
        return [_row_to_transaction(row) for row in rows]
