"""
거래 서비스

TransactionStore 호출 및 API 응답(dict) 변환
"""

from datetime import date, timezone
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import LedgerConfig
from core.ledger.balance import format_money
from core.ledger.transaction_store import TransactionStore
from core.ledger.types import Transaction, TransactionInput
from core.utils.dates import format_day_utc


def transaction_to_dict(transaction: Transaction, tz: timezone) -> dict[str, Any]:
    """Transaction → API 응답 dict

    금액은 "32.99" 형식 문자열.
    날짜는 장부 타임존 자정의 UTC 시각 ("2026-10-19T03:00:00.000Z").
    조회 결과를 그대로 PUT 해도 날짜가 바뀌지 않음.
    """
    return {
        "id": transaction.id,
        "conta_id": transaction.account_id,
        "tipo": transaction.kind.value,
        "status": transaction.settled,
        "descricao": transaction.description,
        "valor": format_money(transaction.amount),
        "envolvido": transaction.counterparty,
        "data_transacao": format_day_utc(transaction.transaction_date, tz),
        "data_pagamento": format_day_utc(transaction.payment_date, tz),
    }


class TransactionService:
    """거래 서비스

    Args:
        db: SQLite 어댑터
        config: 장부 동작 설정
    """

    def __init__(self, db: SQLiteAdapter, config: LedgerConfig):
        self.db = db
        self.tz = config.tz
        self.store = TransactionStore(db, delete_mode=config.delete_mode, tz=config.tz)

    async def create_transaction(
        self,
        data: TransactionInput,
        reference_date: date,
    ) -> dict[str, Any]:
        """거래 생성"""
        return transaction_to_dict(await self.store.create(data, reference_date), self.tz)

    async def update_transaction(
        self,
        transaction_id: int,
        patch: TransactionInput,
        reference_date: date,
    ) -> dict[str, Any]:
        """거래 수정"""
        return transaction_to_dict(
            await self.store.update(transaction_id, patch, reference_date),
            self.tz,
        )

    async def delete_transaction(self, transaction_id: int, reference_date: date) -> None:
        """거래 삭제"""
        await self.store.delete(transaction_id, reference_date)

    async def get_transaction(self, transaction_id: int) -> dict[str, Any]:
        """거래 단건 조회"""
        return transaction_to_dict(await self.store.get(transaction_id), self.tz)

    async def get_transactions(
        self,
        description: str | None = None,
        account_id: int | None = None,
    ) -> list[dict[str, Any]]:
        """거래 목록 조회

        Args:
            description: 설명 필터 (정확히 일치)
            account_id: 계정 필터
        """
        transactions = await self.store.list_transactions(
            description=description,
            account_id=account_id,
        )
        return [transaction_to_dict(t, self.tz) for t in transactions]
