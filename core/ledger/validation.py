"""
거래 입력 검증

TransactionInput(원본 값) → TransactionFields(저장 가능한 값).
실패 시 클라이언트 메시지를 담은 ValidationError 발생.
"""

from datetime import timezone

from core.constants import Messages
from core.ledger.balance import to_money
from core.ledger.errors import ValidationError
from core.ledger.types import TransactionFields, TransactionInput, TransactionKind
from core.utils.dates import parse_day


def _require_text(value: str | None, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value)


def validate_account_name(name: str | None) -> str:
    """계정명 검증 (비어 있지 않은 문자열)"""
    return _require_text(name, Messages.NAME_REQUIRED)


def validate_transaction(data: TransactionInput, tz: timezone | None = None) -> TransactionFields:
    """거래 입력 검증

    검증 순서는 API 응답 메시지 우선순위와 같음.

    Args:
        data: 원본 입력
        tz: 장부 타임존 (ISO datetime 입력의 날짜 계산용)

    Returns:
        TransactionFields

    Raises:
        ValidationError: 필수 필드 누락, 형식 오류, 금액 <= 0
    """
    if data.kind is None or not str(data.kind).strip():
        raise ValidationError(Messages.KIND_REQUIRED)
    try:
        kind = TransactionKind(str(data.kind).strip().upper())
    except ValueError as e:
        raise ValidationError(Messages.KIND_INVALID) from e

    if data.account_id is None:
        raise ValidationError(Messages.ACCOUNT_REQUIRED)

    description = _require_text(data.description, Messages.DESCRIPTION_REQUIRED)
    counterparty = _require_text(data.counterparty, Messages.COUNTERPARTY_REQUIRED)

    if data.amount is None or (isinstance(data.amount, str) and not data.amount.strip()):
        raise ValidationError(Messages.AMOUNT_REQUIRED)
    try:
        amount = to_money(data.amount)
    except ValueError as e:
        raise ValidationError(Messages.AMOUNT_INVALID) from e
    if amount <= 0:
        raise ValidationError(Messages.AMOUNT_NOT_POSITIVE)

    if data.transaction_date is None or data.transaction_date == "":
        raise ValidationError(Messages.TRANSACTION_DATE_REQUIRED)
    try:
        transaction_date = parse_day(data.transaction_date, tz)
    except ValueError as e:
        raise ValidationError(Messages.TRANSACTION_DATE_INVALID) from e

    if data.payment_date is None or data.payment_date == "":
        raise ValidationError(Messages.PAYMENT_DATE_REQUIRED)
    try:
        payment_date = parse_day(data.payment_date, tz)
    except ValueError as e:
        raise ValidationError(Messages.PAYMENT_DATE_INVALID) from e

    return TransactionFields(
        account_id=int(data.account_id),
        kind=kind,
        settled=bool(data.settled) if data.settled is not None else False,
        description=description,
        amount=amount,
        counterparty=counterparty,
        transaction_date=transaction_date,
        payment_date=payment_date,
    )
