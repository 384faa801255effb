"""
계정 저장소

계정 생성/이름 변경/조회/삭제.
이름 유일성은 UNIQUE 인덱스로 INSERT와 원자적으로 검사.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiosqlite

from core.constants import Messages
from core.ledger.errors import DuplicateNameError, NotFoundError, ValidationError
from core.ledger.types import Account
from core.ledger.validation import validate_account_name
from core.types import DeleteMode

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


class AccountRegistry:
    """계정 저장소

    Args:
        db: SQLite 어댑터
        case_sensitive_names: 계정명 대소문자 구분 여부
            (init_schema에 전달한 값과 같아야 함)
        delete_mode: 삭제 방식 (hard/soft)
    """

    def __init__(
        self,
        db: SQLiteAdapter,
        case_sensitive_names: bool = True,
        delete_mode: DeleteMode = DeleteMode.HARD,
    ):
        self.db = db
        self.case_sensitive_names = case_sensitive_names
        self.delete_mode = delete_mode

    @property
    def _name_match(self) -> str:
        """이름 비교 SQL 조건"""
        if self.case_sensitive_names:
            return "name = ?"
        return "name = ? COLLATE NOCASE"

    async def create(self, name: str | None) -> Account:
        """계정 생성

        Args:
            name: 계정명

        Returns:
            생성된 Account

        Raises:
            ValidationError: 이름이 비어 있음
            DuplicateNameError: 같은 이름의 계정 존재
        """
        name = validate_account_name(name)

        try:
            async with self.db.transaction(immediate=True):
                cursor = await self.db.execute(
                    "INSERT INTO account (name) VALUES (?)",
                    (name,),
                )
                account_id = cursor.lastrowid
        except aiosqlite.IntegrityError as e:
            logger.warning(f"Duplicate account name rejected: {name!r}")
            raise DuplicateNameError() from e

        logger.info(f"Account created: id={account_id} name={name!r}")
        return Account(id=account_id, name=name)

    async def rename(self, account_id: int, new_name: str | None) -> Account:
        """계정 이름 변경

        자기 자신의 현재 이름으로 변경하는 것은 허용.

        Raises:
            ValidationError: 이름이 비어 있음
            NotFoundError: 계정 없음
            DuplicateNameError: 다른 계정과 이름 충돌
        """
        new_name = validate_account_name(new_name)

        try:
            async with self.db.transaction(immediate=True):
                cursor = await self.db.execute(
                    """
                    UPDATE account
                    SET name = ?, updated_at = datetime('now')
                    WHERE id = ? AND deleted_at IS NULL
                    """,
                    (new_name, account_id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(Messages.ACCOUNT_NOT_FOUND)
        except aiosqlite.IntegrityError as e:
            logger.warning(f"Duplicate account name rejected on rename: {new_name!r}")
            raise DuplicateNameError() from e

        logger.info(f"Account renamed: id={account_id} name={new_name!r}")
        return Account(id=account_id, name=new_name)

    async def get(self, account_id: int) -> Account:
        """계정 조회

        Raises:
            NotFoundError: 계정 없음
        """
        row = await self.db.fetchone(
            "SELECT id, name FROM account WHERE id = ? AND deleted_at IS NULL",
            (account_id,),
        )
        if row is None:
            raise NotFoundError(Messages.ACCOUNT_NOT_FOUND)
        return Account(id=row[0], name=row[1])

    async def exists(self, account_id: int) -> bool:
        """계정 존재 여부"""
        row = await self.db.fetchone(
            "SELECT 1 FROM account WHERE id = ? AND deleted_at IS NULL",
            (account_id,),
        )
        return row is not None

    async def find_by_name(self, name: str) -> Account | None:
        """이름으로 계정 조회 (없으면 None)"""
        row = await self.db.fetchone(
            f"SELECT id, name FROM account WHERE {self._name_match} AND deleted_at IS NULL",
            (name,),
        )
        if row is None:
            return None
        return Account(id=row[0], name=row[1])

    async def list_accounts(self, name: str | None = None) -> list[Account]:
        """계정 목록 조회 (ID 순)

        Args:
            name: 이름 필터 (정확히 일치)
        """
        sql = "SELECT id, name FROM account WHERE deleted_at IS NULL"
        params: list[str] = []
        if name is not None:
            sql += f" AND {self._name_match}"
            params.append(name)
        sql += " ORDER BY id"

        rows = await self.db.fetchall(sql, tuple(params))
        return [Account(id=row[0], name=row[1]) for row in rows]

    async def delete(self, account_id: int) -> None:
        """계정 삭제

        살아 있는 거래가 연결된 계정은 삭제 불가.

        Raises:
            NotFoundError: 계정 없음
            ValidationError: 연결된 거래 존재
        """
        async with self.db.transaction(immediate=True):
            if not await self.exists(account_id):
                raise NotFoundError(Messages.ACCOUNT_NOT_FOUND)

            row = await self.db.fetchone(
                """
                SELECT COUNT(*) FROM ledger_transaction
                WHERE account_id = ? AND deleted_at IS NULL
                """,
                (account_id,),
            )
            if row and row[0] > 0:
                raise ValidationError(Messages.ACCOUNT_HAS_TRANSACTIONS)

            await self.db.execute(
                "DELETE FROM account_balance WHERE account_id = ?",
                (account_id,),
            )

            if self.delete_mode == DeleteMode.SOFT:
                await self.db.execute(
                    "UPDATE account SET deleted_at = datetime('now') WHERE id = ?",
                    (account_id,),
                )
            else:
                # soft delete 모드에서 남은 거래 이력 정리 (외래 키)
                await self.db.execute(
                    "DELETE FROM ledger_transaction WHERE account_id = ?",
                    (account_id,),
                )
                await self.db.execute(
                    "DELETE FROM account WHERE id = ?",
                    (account_id,),
                )

        logger.info(
            f"Account deleted: id={account_id}",
            extra={"delete_mode": self.delete_mode.value},
        )
