"""
Web API 통합 테스트 fixture

임시 settings.yaml + DB로 FastAPI 앱을 httpx ASGITransport에 연결.
"""

from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from web.app import app
from web.dependencies import get_app_settings


def _write_settings(temp_dir: Path, allow_reset: bool) -> Path:
    db_path = (temp_dir / "ledger.db").as_posix()
    path = temp_dir / "settings.yaml"
    path.write_text(
        f"""database:
  path: "{db_path}"

ledger:
  utc_offset_hours: -3
  case_sensitive_names: true
  delete_mode: hard
  allow_reset: {"true" if allow_reset else "false"}
""",
        encoding="utf-8",
    )
    return path


async def _make_client(temp_dir: Path, allow_reset: bool = True):
    settings = get_settings(_write_settings(temp_dir, allow_reset))

    # ASGITransport는 lifespan을 실행하지 않으므로 스키마 직접 초기화
    # 연결을 테스트 동안 유지 (WAL 공유 메모리 파일 보존)
    keeper = SQLiteAdapter(settings.db_path)
    await keeper.connect()
    await init_schema(keeper, case_sensitive_names=settings.ledger.case_sensitive_names)

    app.dependency_overrides[get_app_settings] = lambda: settings
    client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    return client, keeper


@pytest_asyncio.fixture
async def client(temp_dir: Path):
    """API 클라이언트 (reset 허용)"""
    client, keeper = await _make_client(temp_dir)
    async with client:
        yield client
    app.dependency_overrides.clear()
    await keeper.close()


@pytest_asyncio.fixture
async def client_no_reset(temp_dir: Path):
    """API 클라이언트 (reset 비활성화)"""
    client, keeper = await _make_client(temp_dir, allow_reset=False)
    async with client:
        yield client
    app.dependency_overrides.clear()
    await keeper.close()


@pytest_asyncio.fixture
async def seeded(client: AsyncClient) -> AsyncClient:
    """초기 데이터가 들어간 클라이언트"""
    response = await client.get("/reset")
    assert response.status_code == 200
    return client
