"""Ledger 타입 테스트"""

from datetime import date
from decimal import Decimal

import pytest

from core.ledger.errors import DuplicateNameError, LedgerError, ValidationError
from core.ledger.types import Account, AccountBalance, TransactionKind


class TestTransactionKind:
    """TransactionKind Enum 테스트"""

    def test_wire_values(self) -> None:
        assert TransactionKind.INCOME.value == "REC"
        assert TransactionKind.EXPENSE == "DESP"

    def test_sign(self) -> None:
        assert TransactionKind.INCOME.sign == 1
        assert TransactionKind.EXPENSE.sign == -1


class TestAccount:
    """Account 데이터클래스 테스트"""

    def test_frozen(self) -> None:
        account = Account(id=1, name="Conta")

        with pytest.raises(AttributeError):
            account.name = "Outra"  # type: ignore


class TestAccountBalance:
    """AccountBalance 테스트"""

    def test_as_of_not_compared(self) -> None:
        first = AccountBalance(1, "Conta", Decimal("1.00"), as_of=date(2021, 1, 1))
        second = AccountBalance(1, "Conta", Decimal("1.00"), as_of=date(2021, 1, 2))

        assert first == second


class TestErrors:
    """장부 예외 테스트"""

    def test_duplicate_default_message(self) -> None:
        error = DuplicateNameError()

        assert isinstance(error, ValidationError)
        assert isinstance(error, LedgerError)
        assert error.message == "Já existe uma conta com esse nome!"
        assert str(error) == error.message
