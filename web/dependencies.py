"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from datetime import date
from typing import AsyncGenerator

from fastapi import Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from core.utils.timezone import today_in


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (읽기 전용)

    목록/단건 조회에 사용.
    """
    async with SQLiteAdapter(settings.db_path, readonly=True) as db:
        yield db


async def get_db_write(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (쓰기 가능)

    생성/수정/삭제 및 잔액 조회(Projection 갱신 가능) 시 사용.
    """
    async with SQLiteAdapter(settings.db_path, readonly=False) as db:
        yield db


def get_reference_date(settings: Settings = Depends(get_app_settings)) -> date:
    """잔액 기준일 (장부 타임존의 오늘)"""
    return today_in(settings.ledger.tz)
