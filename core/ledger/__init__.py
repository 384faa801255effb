"""
장부 (계정/거래/잔액) 시스템

계정과 거래를 저장하고, settled 이며 결제일이 도래한 거래만으로
계정 잔액을 계산.

사용 예시:
```python
from core.ledger import AccountRegistry, TransactionStore, TransactionInput

registry = AccountRegistry(db)
account = await registry.create("Carteira")

store = TransactionStore(db)
await store.create(
    TransactionInput(
        account_id=account.id,
        kind="REC",
        settled=True,
        description="Salario",
        amount="100.00",
        counterparty="Empresa",
        transaction_date="01/02/2026",
        payment_date="01/02/2026",
    ),
    reference_date=date(2026, 2, 1),
)

# 잔액 조회
balances = await store.balances.get_balances(date(2026, 2, 1))
```
"""

from core.ledger.account_registry import AccountRegistry
from core.ledger.balance import compute_balance, contributes, format_money, signed_contribution, to_money
from core.ledger.balance_store import BalanceStore
from core.ledger.errors import (
    DuplicateNameError,
    LedgerError,
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from core.ledger.seed import SEED_ACCOUNTS, SEED_TRANSACTIONS, reset_ledger
from core.ledger.transaction_store import TransactionStore
from core.ledger.types import (
    Account,
    AccountBalance,
    Transaction,
    TransactionFields,
    TransactionInput,
    TransactionKind,
)

__all__ = [
    # 핵심 클래스
    "AccountRegistry",
    "TransactionStore",
    "BalanceStore",
    # 모델
    "Account",
    "AccountBalance",
    "Transaction",
    "TransactionFields",
    "TransactionInput",
    "TransactionKind",
    # 잔액 계산
    "compute_balance",
    "contributes",
    "signed_contribution",
    "to_money",
    "format_money",
    # 예외
    "LedgerError",
    "ValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "OperationNotAllowedError",
    # 초기 데이터
    "SEED_ACCOUNTS",
    "SEED_TRANSACTIONS",
    "reset_ledger",
]
