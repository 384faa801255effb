"""
잔액 계산 엔진

계정 잔액 = Σ(부호 × 금액), 대상은 settled 이고 payment_date <= 기준일인 거래.

기준일(reference_date)은 항상 인자로 전달받음 (시계 직접 참조 금지).
"""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Protocol

# 통화 정밀도 (소수점 2자리)
MONEY_QUANT = Decimal("0.01")
ZERO = Decimal("0.00")


class BalanceItem(Protocol):
    """잔액 계산에 필요한 거래 속성"""

    kind: Any
    settled: bool
    amount: Decimal
    payment_date: date


def to_money(value: Any) -> Decimal:
    """금액 변환 (소수점 2자리, 반올림)

    float는 repr 문자열을 거쳐 변환하므로 32.99 → Decimal("32.99").

    Args:
        value: Decimal, int, float, str

    Returns:
        소수점 2자리로 정규화된 Decimal

    Raises:
        ValueError: 숫자가 아니거나 유한하지 않은 값
    """
    if isinstance(value, bool):
        raise ValueError(f"금액이 아닙니다: {value!r}")

    if isinstance(value, float):
        value = repr(value)

    try:
        amount = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"금액이 아닙니다: {value!r}") from e

    if not amount.is_finite():
        raise ValueError(f"유한한 금액이 아닙니다: {value!r}")

    try:
        return amount.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        # 정밀도(28자리) 초과
        raise ValueError(f"표현할 수 없는 금액입니다: {value!r}") from e


def format_money(value: Decimal) -> str:
    """금액을 소수점 2자리 문자열로 변환

    Example:
        >>> format_money(Decimal("534"))
        '534.00'
    """
    quantized = value.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)
    if quantized.is_zero():
        # "-0.00" 방지
        quantized = ZERO
    return f"{quantized:f}"


def _kind_sign(kind: Any) -> int:
    sign = getattr(kind, "sign", None)
    if sign is not None:
        return sign
    # 문자열 kind 허용 (REC/DESP)
    return 1 if str(kind) == "REC" else -1


def signed_contribution(item: BalanceItem) -> Decimal:
    """거래의 부호 있는 기여액 (수입 +, 지출 -)"""
    return item.amount * _kind_sign(item.kind)


def contributes(item: BalanceItem, reference_date: date) -> bool:
    """잔액 반영 대상 여부

    - settled=False: 날짜와 무관하게 제외
    - payment_date > reference_date: 아직 반영되지 않음
    """
    return item.settled and item.payment_date <= reference_date


def compute_balance(items: Iterable[BalanceItem], reference_date: date) -> Decimal:
    """계정 잔액 계산

    Args:
        items: 한 계정의 거래 목록
        reference_date: 기준일 (day 단위)

    Returns:
        소수점 2자리 Decimal 잔액
    """
    total = ZERO
    for item in items:
        if contributes(item, reference_date):
            total += signed_contribution(item)
    return total.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


# 변경 시 잔액 재계산이 필요한 필드
BALANCE_FIELDS: tuple[str, ...] = ("account_id", "settled", "amount", "kind", "payment_date")


def affects_balance(before: Any, after: Any) -> bool:
    """두 거래 상태 사이에 잔액 관련 필드가 바뀌었는지 여부"""
    return any(getattr(before, name) != getattr(after, name) for name in BALANCE_FIELDS)
