"""
reset_ledger 통합 테스트
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.account_registry import AccountRegistry
from core.ledger.balance_store import BalanceStore
from core.ledger.seed import SEED_ACCOUNTS, SEED_TRANSACTIONS, reset_ledger
from core.ledger.transaction_store import TransactionStore
from core.ledger.types import TransactionInput


async def balance_of(db: SQLiteAdapter, name: str, reference_date: date) -> Decimal:
    for item in await BalanceStore(db).get_balances(reference_date):
        if item.account_name == name:
            return item.balance
    raise AssertionError(f"계정 없음: {name}")


class TestResetLedger:
    """reset_ledger 테스트"""

    @pytest.mark.asyncio
    async def test_counts(self, db: SQLiteAdapter, reference_date: date) -> None:
        counts = await reset_ledger(db, reference_date)

        assert counts == {
            "accounts": len(SEED_ACCOUNTS),
            "transactions": len(SEED_TRANSACTIONS),
        }
        assert [a.name for a in await AccountRegistry(db).list_accounts()] == SEED_ACCOUNTS

    @pytest.mark.asyncio
    async def test_replaces_existing_data(
        self,
        db: SQLiteAdapter,
        reference_date: date,
    ) -> None:
        registry = AccountRegistry(db)
        await registry.create("Antiga")

        await reset_ledger(db, reference_date)
        await reset_ledger(db, reference_date)

        accounts = await registry.list_accounts()
        assert "Antiga" not in [a.name for a in accounts]
        assert len(accounts) == len(SEED_ACCOUNTS)
        # ID 재시작
        assert accounts[0].id == 1

    @pytest.mark.asyncio
    async def test_seed_balances(self, db: SQLiteAdapter, reference_date: date) -> None:
        await reset_ledger(db, reference_date)

        assert await balance_of(db, "Conta para saldo", reference_date) == Decimal("534.00")
        assert await balance_of(db, "Conta com movimentacao", reference_date) == Decimal("-1500.00")
        assert await balance_of(db, "Conta para extrato", reference_date) == Decimal("-220.00")
        assert await balance_of(db, "Conta mesmo nome", reference_date) == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_future_seed_transaction(
        self,
        db: SQLiteAdapter,
        reference_date: date,
    ) -> None:
        """결제일 도래 후 반영"""
        await reset_ledger(db, reference_date)

        later = reference_date + timedelta(days=5)
        assert await balance_of(db, "Conta para extrato", later) == Decimal("-120.00")

    @pytest.mark.asyncio
    async def test_settle_and_delete_scenario(
        self,
        db: SQLiteAdapter,
        reference_date: date,
    ) -> None:
        """settled 처리 → 4034.00, 삭제 → 1534.00"""
        await reset_ledger(db, reference_date)
        store = TransactionStore(db)

        [first] = await store.list_transactions(description="Movimentacao 1, calculo saldo")
        await store.update(first.id, TransactionInput(settled=True), reference_date)
        assert await balance_of(db, "Conta para saldo", reference_date) == Decimal("4034.00")

        await reset_ledger(db, reference_date)
        [second] = await store.list_transactions(description="Movimentacao 2, calculo saldo")
        await store.delete(second.id, reference_date)
        assert await balance_of(db, "Conta para saldo", reference_date) == Decimal("1534.00")
