"""
장부 타입 정의

계정/거래 도메인 모델 및 Enum 정의.
모든 금액은 Decimal 타입 사용.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


class TransactionKind(str, Enum):
    """거래 유형

    API 값 그대로 사용 (REC = receita, DESP = despesa).
    str을 상속하여 JSON 직렬화 가능.
    """

    INCOME = "REC"  # 수입 (+)
    EXPENSE = "DESP"  # 지출 (-)

    @property
    def sign(self) -> int:
        """잔액 기여 부호"""
        return 1 if self is TransactionKind.INCOME else -1


@dataclass(frozen=True)
class Account:
    """계정

    Attributes:
        id: 계정 ID (생성 시 부여)
        name: 계정명 (전체 계정에서 유일)
    """

    id: int
    name: str


@dataclass(frozen=True)
class Transaction:
    """거래

    Attributes:
        id: 거래 ID
        account_id: 소속 계정 ID
        kind: 수입/지출
        settled: 실제 입출금 완료 여부
        description: 설명
        amount: 금액 (항상 양수, 부호는 kind가 결정)
        counterparty: 거래 상대방
        transaction_date: 거래 등록일
        payment_date: 지급(예정)일
    """

    id: int
    account_id: int
    kind: TransactionKind
    settled: bool
    description: str
    amount: Decimal
    counterparty: str
    transaction_date: date
    payment_date: date


@dataclass(frozen=True)
class TransactionFields:
    """검증을 통과한 거래 필드 (저장 직전 형태)"""

    account_id: int
    kind: TransactionKind
    settled: bool
    description: str
    amount: Decimal
    counterparty: str
    transaction_date: date
    payment_date: date


@dataclass
class TransactionInput:
    """거래 생성/수정 입력

    검증 전 원본 값. None 필드는 "값 없음" (생성) 또는
    "변경 없음" (수정)을 의미.
    """

    account_id: int | None = None
    kind: str | None = None
    settled: bool | None = None
    description: str | None = None
    amount: Any = None
    counterparty: str | None = None
    transaction_date: Any = None
    payment_date: Any = None

    def merged_over(self, current: Transaction) -> "TransactionInput":
        """현재 거래 값 위에 입력값을 덮어쓴 입력 반환 (부분 수정용)"""
        return TransactionInput(
            account_id=self.account_id if self.account_id is not None else current.account_id,
            kind=self.kind if self.kind is not None else current.kind.value,
            settled=self.settled if self.settled is not None else current.settled,
            description=self.description if self.description is not None else current.description,
            amount=self.amount if self.amount is not None else current.amount,
            counterparty=self.counterparty if self.counterparty is not None else current.counterparty,
            transaction_date=(
                self.transaction_date if self.transaction_date is not None else current.transaction_date
            ),
            payment_date=self.payment_date if self.payment_date is not None else current.payment_date,
        )


@dataclass(frozen=True)
class AccountBalance:
    """계정별 잔액"""

    account_id: int
    account_name: str
    balance: Decimal
    as_of: date | None = field(default=None, compare=False)
