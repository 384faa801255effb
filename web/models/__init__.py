"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountRequest,
    TransactionRequest,
)
from web.models.responses import (
    AccountResponse,
    BalanceResponse,
    ErrorResponse,
    HealthResponse,
    ResetResponse,
    TransactionResponse,
)

__all__ = [
    # Requests
    "AccountRequest",
    "TransactionRequest",
    # Responses
    "AccountResponse",
    "BalanceResponse",
    "ErrorResponse",
    "HealthResponse",
    "ResetResponse",
    "TransactionResponse",
]
