"""
Web 서비스 패키지

비즈니스 로직 호출 및 응답 변환
"""

from web.services.account_service import AccountService
from web.services.balance_service import BalanceService
from web.services.reset_service import ResetService
from web.services.transaction_service import TransactionService

__all__ = [
    "AccountService",
    "BalanceService",
    "ResetService",
    "TransactionService",
]
