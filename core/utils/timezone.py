"""
타임존 유틸리티

내부 저장: 날짜(day) 단위 | 기준일: 장부 타임존의 "오늘" 원칙 준수를 위한 헬퍼 함수
"""

from datetime import date, datetime, timezone, timedelta


def ledger_timezone(utc_offset_hours: int) -> timezone:
    """고정 오프셋 타임존 생성

    Args:
        utc_offset_hours: UTC 대비 시간 차 (예: -3)

    Returns:
        고정 오프셋 timezone

    Example:
        >>> ledger_timezone(-3)
        datetime.timezone(datetime.timedelta(days=-1, seconds=75600))
    """
    return timezone(timedelta(hours=utc_offset_hours))


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def to_local(dt: datetime, tz: timezone) -> datetime:
    """datetime을 장부 타임존으로 변환

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)
        tz: 장부 타임존

    Returns:
        장부 타임존의 datetime
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz)


def today_in(tz: timezone, now: datetime | None = None) -> date:
    """장부 타임존 기준 오늘 날짜

    잔액 계산의 기준일(reference date)로 사용.

    Args:
        tz: 장부 타임존
        now: 현재 시각 (테스트용, None이면 now_utc())

    Returns:
        day 단위 날짜

    Example:
        >>> today_in(ledger_timezone(-3), datetime(2026, 2, 21, 1, 0, tzinfo=timezone.utc))
        datetime.date(2026, 2, 20)  # UTC 01:00 = 전날 22:00
    """
    if now is None:
        now = now_utc()
    return to_local(now, tz).date()
