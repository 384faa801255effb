"""
SQLite 어댑터

장부 DB(계정/거래/잔액) 연결과 스키마 관리.
요청마다 연결을 새로 열고, 쓰기는 BEGIN IMMEDIATE로 직렬화.

테이블명 transaction은 SQL 예약어이므로 ledger_transaction 사용.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)

# 연결마다 적용하는 PRAGMA (순서 유지: busy_timeout이 journal_mode 전환보다 먼저)
CONNECTION_PRAGMAS: tuple[str, ...] = (
    "PRAGMA busy_timeout=30000",
    "PRAGMA journal_mode=WAL",
    "PRAGMA foreign_keys=ON",
)

Params = tuple[Any, ...] | None


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """장부 DB 연결 생성

    상위 디렉토리가 없으면 만든 뒤 CONNECTION_PRAGMAS 적용.

    Args:
        db_path: DB 파일 경로
        readonly: True이면 mode=ro URI로 연결 (조회 API용)

    Returns:
        aiosqlite 연결 객체
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if readonly:
        conn = await aiosqlite.connect(f"file:{path}?mode=ro", uri=True)
    else:
        conn = await aiosqlite.connect(str(path))

    for pragma in CONNECTION_PRAGMAS:
        await conn.execute(pragma)

    logger.debug(f"DB 연결: {path}", extra={"readonly": readonly})
    return conn


class SQLiteAdapter:
    """장부 DB 어댑터

    연결 하나를 감싸고 쿼리/트랜잭션 헬퍼 제공.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 연결 여부

    사용 예시:
    ```python
    async with SQLiteAdapter(settings.db_path) as db:
        async with db.transaction(immediate=True):
            await db.execute("INSERT INTO account (name) VALUES (?)", ("Carteira",))
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    @property
    def in_transaction(self) -> bool:
        """열린 트랜잭션이 있는지 여부"""
        return self._conn is not None and self._conn.in_transaction

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError(f"DB not connected: {self.db_path}")
        return self._conn

    async def connect(self) -> None:
        if self._conn is None:
            self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        conn, self._conn = self._conn, None
        if conn is not None:
            await conn.close()
            logger.debug(f"DB 연결 종료: {self.db_path}")

    async def execute(self, sql: str, parameters: Params = None) -> aiosqlite.Cursor:
        """SQL 실행 (파라미터 바인딩)"""
        return await self._require_conn().execute(sql, parameters or ())

    async def executemany(
        self,
        sql: str,
        parameters: list[tuple[Any, ...]],
    ) -> aiosqlite.Cursor:
        """같은 SQL을 여러 파라미터로 실행"""
        return await self._require_conn().executemany(sql, parameters)

    async def fetchone(self, sql: str, parameters: Params = None) -> tuple[Any, ...] | None:
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(self, sql: str, parameters: Params = None) -> list[tuple[Any, ...]]:
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self, immediate: bool = False) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 범위 (정상 종료 시 커밋, 예외 시 롤백 후 재발생)

        immediate=True이면 BEGIN IMMEDIATE로 쓰기 락을 먼저 잡음.
        조회 후 갱신하는 구간(이름 중복 검사, 잔액 재계산)이
        다른 연결의 쓰기와 섞이지 않음.
        이미 열린 트랜잭션 안에서는 BEGIN을 다시 실행하지 않음.
        """
        conn = self._require_conn()
        if immediate and not conn.in_transaction:
            await conn.execute("BEGIN IMMEDIATE")

        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def _schema_object_exists(self, kind: str, name: str) -> bool:
        row = await self.fetchone(
            "SELECT 1 FROM sqlite_master WHERE type = ? AND name = ?",
            (kind, name),
        )
        return row is not None

    async def table_exists(self, table_name: str) -> bool:
        return await self._schema_object_exists("table", table_name)

    async def index_exists(self, index_name: str) -> bool:
        return await self._schema_object_exists("index", index_name)

    async def get_table_info(self, table_name: str) -> list[dict[str, Any]]:
        """컬럼 정보 (PRAGMA table_info) 목록"""
        rows = await self.fetchall(f"PRAGMA table_info({table_name})")
        keys = ("cid", "name", "type", "notnull", "default_value", "pk")
        return [dict(zip(keys, row)) for row in rows]

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


# 계정명 유일성 인덱스 (설정에 따라 둘 중 하나만 유지)
ACCOUNT_NAME_INDEX = "ux_account_name"
ACCOUNT_NAME_INDEX_NOCASE = "ux_account_name_nocase"


async def init_schema(adapter: SQLiteAdapter, case_sensitive_names: bool = True) -> None:
    """스키마 초기화 (테이블 생성)

    Args:
        adapter: 연결된 SQLiteAdapter
        case_sensitive_names: 계정명 대소문자 구분 여부

    주의: 계정명 유일성은 부분 인덱스(deleted_at IS NULL)로 강제.
    soft delete된 계정의 이름은 재사용 가능.
    """
    # account
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS account (
            id               INTEGER PRIMARY KEY AUTOINCREMENT,
            name             TEXT NOT NULL,

            created_at       TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at       TEXT NOT NULL DEFAULT (datetime('now')),
            deleted_at       TEXT
        )
    """)

    # ledger_transaction
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS ledger_transaction (
            id               INTEGER PRIMARY KEY AUTOINCREMENT,
            account_id       INTEGER NOT NULL REFERENCES account(id),

            kind             TEXT NOT NULL CHECK (kind IN ('REC', 'DESP')),
            settled          INTEGER NOT NULL DEFAULT 0,

            description      TEXT NOT NULL,
            amount           TEXT NOT NULL,
            counterparty     TEXT NOT NULL,

            transaction_date TEXT NOT NULL,
            payment_date     TEXT NOT NULL,

            created_at       TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at       TEXT NOT NULL DEFAULT (datetime('now')),
            deleted_at       TEXT
        )
    """)

    # account_balance (계정별 잔액 Projection)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS account_balance (
            account_id       INTEGER PRIMARY KEY REFERENCES account(id) ON DELETE CASCADE,
            balance          TEXT NOT NULL DEFAULT '0.00',
            as_of            TEXT NOT NULL,
            updated_at       TEXT NOT NULL DEFAULT (datetime('now'))
        )
    """)

    # 계정명 유일성 인덱스
    if case_sensitive_names:
        await adapter.execute(f"DROP INDEX IF EXISTS {ACCOUNT_NAME_INDEX_NOCASE}")
        await adapter.execute(f"""
            CREATE UNIQUE INDEX IF NOT EXISTS {ACCOUNT_NAME_INDEX}
            ON account(name) WHERE deleted_at IS NULL
        """)
    else:
        await adapter.execute(f"DROP INDEX IF EXISTS {ACCOUNT_NAME_INDEX}")
        await adapter.execute(f"""
            CREATE UNIQUE INDEX IF NOT EXISTS {ACCOUNT_NAME_INDEX_NOCASE}
            ON account(name COLLATE NOCASE) WHERE deleted_at IS NULL
        """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_ledger_transaction_account
        ON ledger_transaction(account_id, settled, payment_date)
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_ledger_transaction_description
        ON ledger_transaction(description)
    """)

    await adapter.commit()

    logger.info(
        "스키마 초기화 완료",
        extra={"case_sensitive_names": case_sensitive_names},
    )
