"""
거래/계정 입력 검증 테스트
"""

from datetime import date
from decimal import Decimal

import pytest

from core.constants import Messages
from core.ledger.errors import ValidationError
from core.ledger.types import Transaction, TransactionInput, TransactionKind
from core.ledger.validation import validate_account_name, validate_transaction
from core.utils.timezone import ledger_timezone


def valid_input(**overrides) -> TransactionInput:
    """유효한 거래 입력"""
    data = TransactionInput(
        account_id=1,
        kind="REC",
        settled=True,
        description="Movimentacao",
        amount="32.99",
        counterparty="Interessado",
        transaction_date="01/06/2021",
        payment_date="02/06/2021",
    )
    for key, value in overrides.items():
        setattr(data, key, value)
    return data


class TestValidateAccountName:
    """validate_account_name 테스트"""

    def test_valid(self) -> None:
        assert validate_account_name("Conta corrente") == "Conta corrente"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing(self, name) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_account_name(name)

        assert exc_info.value.message == Messages.NAME_REQUIRED


class TestValidateTransaction:
    """validate_transaction 테스트"""

    def test_valid(self) -> None:
        fields = validate_transaction(valid_input())

        assert fields.kind == TransactionKind.INCOME
        assert fields.amount == Decimal("32.99")
        assert fields.transaction_date == date(2021, 6, 1)
        assert fields.payment_date == date(2021, 6, 2)
        assert fields.settled is True

    def test_kind_case_insensitive(self) -> None:
        assert validate_transaction(valid_input(kind="desp")).kind == TransactionKind.EXPENSE

    def test_settled_defaults_false(self) -> None:
        assert validate_transaction(valid_input(settled=None)).settled is False

    def test_iso_datetime_with_tz(self) -> None:
        fields = validate_transaction(
            valid_input(payment_date="2021-06-02T01:00:00.000Z"),
            ledger_timezone(-3),
        )

        assert fields.payment_date == date(2021, 6, 1)

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"kind": None}, Messages.KIND_REQUIRED),
            ({"kind": "XYZ"}, Messages.KIND_INVALID),
            ({"account_id": None}, Messages.ACCOUNT_REQUIRED),
            ({"description": ""}, Messages.DESCRIPTION_REQUIRED),
            ({"counterparty": None}, Messages.COUNTERPARTY_REQUIRED),
            ({"amount": None}, Messages.AMOUNT_REQUIRED),
            ({"amount": " "}, Messages.AMOUNT_REQUIRED),
            ({"amount": "abc"}, Messages.AMOUNT_INVALID),
            ({"amount": 0}, Messages.AMOUNT_NOT_POSITIVE),
            ({"amount": "-10"}, Messages.AMOUNT_NOT_POSITIVE),
            ({"transaction_date": None}, Messages.TRANSACTION_DATE_REQUIRED),
            ({"transaction_date": "31/02/2021"}, Messages.TRANSACTION_DATE_INVALID),
            ({"payment_date": ""}, Messages.PAYMENT_DATE_REQUIRED),
            ({"payment_date": "ontem"}, Messages.PAYMENT_DATE_INVALID),
        ],
    )
    def test_invalid(self, overrides: dict, message: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction(valid_input(**overrides))

        assert exc_info.value.message == message

    def test_first_error_wins(self) -> None:
        """여러 필드 누락 시 순서상 첫 오류"""
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction(TransactionInput())

        assert exc_info.value.message == Messages.KIND_REQUIRED


class TestMergedOver:
    """TransactionInput.merged_over 테스트"""

    def test_partial_update(self) -> None:
        current = Transaction(
            id=7,
            account_id=1,
            kind=TransactionKind.EXPENSE,
            settled=False,
            description="Original",
            amount=Decimal("10.00"),
            counterparty="Fulano",
            transaction_date=date(2021, 6, 1),
            payment_date=date(2021, 6, 1),
        )

        merged = TransactionInput(settled=True).merged_over(current)
        fields = validate_transaction(merged)

        assert fields.settled is True
        assert fields.kind == TransactionKind.EXPENSE
        assert fields.amount == Decimal("10.00")
        assert fields.description == "Original"
