"""
계정 서비스

AccountRegistry 호출 및 API 응답(dict) 변환
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import LedgerConfig
from core.ledger.account_registry import AccountRegistry
from core.ledger.types import Account


def account_to_dict(account: Account) -> dict[str, Any]:
    """Account → API 응답 dict"""
    return {"id": account.id, "nome": account.name}


class AccountService:
    """계정 서비스

    Args:
        db: SQLite 어댑터
        config: 장부 동작 설정
    """

    def __init__(self, db: SQLiteAdapter, config: LedgerConfig):
        self.db = db
        self.registry = AccountRegistry(
            db,
            case_sensitive_names=config.case_sensitive_names,
            delete_mode=config.delete_mode,
        )

    async def create_account(self, name: str | None) -> dict[str, Any]:
        """계정 생성"""
        return account_to_dict(await self.registry.create(name))

    async def rename_account(self, account_id: int, name: str | None) -> dict[str, Any]:
        """계정 이름 변경"""
        return account_to_dict(await self.registry.rename(account_id, name))

    async def get_account(self, account_id: int) -> dict[str, Any]:
        """계정 단건 조회"""
        return account_to_dict(await self.registry.get(account_id))

    async def get_accounts(self, name: str | None = None) -> list[dict[str, Any]]:
        """계정 목록 조회 (이름 필터 선택)"""
        accounts = await self.registry.list_accounts(name)
        return [account_to_dict(account) for account in accounts]

    async def delete_account(self, account_id: int) -> None:
        """계정 삭제"""
        await self.registry.delete(account_id)
