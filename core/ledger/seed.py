"""
초기 데이터 (시나리오 테스트용)

reset_ledger()는 모든 계정/거래/잔액을 지우고 아래 데이터를 다시 넣음.
거래 날짜는 기준일 대비 일 수(offset)로 정의.

"Conta para saldo" 기준 잔액:
- 초기: 1534.00 - 1000.00 = 534.00
- "Movimentacao 1" settled 처리: 534.00 + 3500.00 = 4034.00
- "Movimentacao 2" 삭제: 534.00 + 1000.00 = 1534.00
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from core.ledger.balance import format_money
from core.ledger.balance_store import BalanceStore
from core.ledger.types import TransactionKind
from core.utils.dates import format_day

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


SEED_ACCOUNTS: list[str] = [
    "Conta para movimentacoes",
    "Conta com movimentacao",
    "Conta para saldo",
    "Conta para extrato",
    "Conta mesmo nome",
    "Conta para alterar",
]


SEED_TRANSACTIONS: list[tuple[str, str, str, TransactionKind, str, bool, int, int]] = [
    # (account, description, counterparty, kind, amount, settled, tx_offset, pay_offset)
    ("Conta com movimentacao", "Movimentacao de conta", "BBB",
     TransactionKind.EXPENSE, "1500.00", True, 0, 0),
    ("Conta para movimentacoes", "Movimentacao para exclusao", "AAA",
     TransactionKind.EXPENSE, "1500.00", True, 0, 0),

    ("Conta para saldo", "Movimentacao 1, calculo saldo", "CCC",
     TransactionKind.INCOME, "3500.00", False, 0, 0),
    ("Conta para saldo", "Movimentacao 2, calculo saldo", "DDD",
     TransactionKind.EXPENSE, "1000.00", True, 0, 0),
    ("Conta para saldo", "Movimentacao 3, calculo saldo", "EEE",
     TransactionKind.INCOME, "1534.00", True, 0, 0),
    ("Conta para saldo", "Movimentacao 4, calculo saldo", "FFF",
     TransactionKind.EXPENSE, "220.00", False, 0, 0),

    ("Conta para extrato", "Movimentacao para extrato", "GGG",
     TransactionKind.EXPENSE, "220.00", True, 0, 0),
    # 결제일 미도래 (settled 이지만 잔액 미반영)
    ("Conta para extrato", "Movimentacao futura", "HHH",
     TransactionKind.INCOME, "100.00", True, 0, 5),
]


async def reset_ledger(db: SQLiteAdapter, reference_date: date) -> dict[str, int]:
    """장부 초기화 후 초기 데이터 삽입

    단일 IMMEDIATE 트랜잭션으로 실행 (실패 시 기존 데이터 유지).

    Args:
        db: SQLite 어댑터 (쓰기 가능)
        reference_date: 날짜 offset 기준일

    Returns:
        삽입된 계정/거래 수
    """
    balances = BalanceStore(db)

    async with db.transaction(immediate=True):
        await db.execute("DELETE FROM account_balance")
        await db.execute("DELETE FROM ledger_transaction")
        await db.execute("DELETE FROM account")
        await db.execute(
            "DELETE FROM sqlite_sequence WHERE name IN ('account', 'ledger_transaction')"
        )

        account_ids: dict[str, int] = {}
        for name in SEED_ACCOUNTS:
            cursor = await db.execute("INSERT INTO account (name) VALUES (?)", (name,))
            account_ids[name] = cursor.lastrowid

        await db.executemany(
            """
            INSERT INTO ledger_transaction (
                account_id, kind, settled, description, amount,
                counterparty, transaction_date, payment_date
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    account_ids[account],
                    kind.value,
                    int(settled),
                    description,
                    format_money(Decimal(amount)),
                    counterparty,
                    format_day(reference_date + timedelta(days=tx_offset)),
                    format_day(reference_date + timedelta(days=pay_offset)),
                )
                for (
                    account, description, counterparty, kind,
                    amount, settled, tx_offset, pay_offset,
                ) in SEED_TRANSACTIONS
            ],
        )

        for account_id in account_ids.values():
            await balances.recompute(account_id, reference_date)

    logger.info(
        f"Ledger reset: {len(SEED_ACCOUNTS)} accounts, {len(SEED_TRANSACTIONS)} transactions",
        extra={"reference_date": format_day(reference_date)},
    )

    return {
        "accounts": len(SEED_ACCOUNTS),
        "transactions": len(SEED_TRANSACTIONS),
    }
