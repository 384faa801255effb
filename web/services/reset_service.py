"""
초기화 서비스

시나리오 테스트 사이 데이터 초기화 (설정으로 비활성화 가능)
"""

import logging
from datetime import date
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import LedgerConfig
from core.constants import Messages
from core.ledger.errors import OperationNotAllowedError
from core.ledger.seed import reset_ledger

logger = logging.getLogger(__name__)


class ResetService:
    """초기화 서비스

    Args:
        db: SQLite 어댑터 (쓰기 가능)
        config: 장부 동작 설정
    """

    def __init__(self, db: SQLiteAdapter, config: LedgerConfig):
        self.db = db
        self.config = config

    async def reset(self, reference_date: date) -> dict[str, Any]:
        """전체 데이터 삭제 후 초기 데이터 삽입

        Raises:
            OperationNotAllowedError: ledger.allow_reset = false
        """
        if not self.config.allow_reset:
            logger.warning("Reset requested while disabled")
            raise OperationNotAllowedError(Messages.RESET_DISABLED)

        counts = await reset_ledger(self.db, reference_date)

        return {
            "status": "ok",
            "contas": counts["accounts"],
            "transacoes": counts["transactions"],
        }
