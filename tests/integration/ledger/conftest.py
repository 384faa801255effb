"""
장부 통합 테스트 fixture

임시 SQLite DB + 스키마 초기화
"""

from datetime import date
from pathlib import Path

import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema


@pytest.fixture
def reference_date() -> date:
    """고정 기준일"""
    return date(2021, 6, 15)


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> SQLiteAdapter:
    """스키마가 초기화된 DB"""
    adapter = SQLiteAdapter(tmp_path / "ledger.db")
    await adapter.connect()
    await init_schema(adapter)
    yield adapter
    await adapter.close()
