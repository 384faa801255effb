"""
날짜 변환 유틸리티

외부 표현(DD/MM/YYYY, ISO 문자열)을 내부 day 단위 date로 정규화.
"""

from datetime import date, datetime, time, timezone

# API 입력 기본 형식 (브라질식)
BR_DATE_FORMAT = "%d/%m/%Y"
ISO_DATE_FORMAT = "%Y-%m-%d"
# API 응답 형식 (밀리초 포함 UTC)
UTC_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"


def parse_day(value: str | date | datetime, tz: timezone | None = None) -> date:
    """다양한 날짜 표현을 date로 변환

    허용 형식:
    - date / datetime 객체
    - "DD/MM/YYYY"
    - "YYYY-MM-DD"
    - ISO datetime ("2021-01-01T03:00:00.000Z" 등)

    타임존이 있는 datetime은 tz로 변환한 뒤 날짜만 취함.
    (UTC 자정 근처 값이 하루 밀리는 문제 방지)

    Args:
        value: 날짜 표현
        tz: 장부 타임존 (None이면 변환 없이 날짜만 취함)

    Returns:
        date

    Raises:
        ValueError: 해석할 수 없는 형식
    """
    if isinstance(value, datetime):
        return _datetime_to_day(value, tz)

    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise ValueError(f"날짜 형식이 아닙니다: {value!r}")

    text = value.strip()
    if not text:
        raise ValueError("빈 날짜 문자열")

    for fmt in (BR_DATE_FORMAT, ISO_DATE_FORMAT):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    # "Z" 접미사는 Python 3.11부터 fromisoformat에서 지원되지만 명시적으로 치환
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"해석할 수 없는 날짜: {value!r}") from e

    return _datetime_to_day(parsed, tz)


def _datetime_to_day(value: datetime, tz: timezone | None) -> date:
    if tz is not None and value.tzinfo is not None:
        value = value.astimezone(tz)
    return value.date()


def format_day(value: date) -> str:
    """date를 ISO 문자열(YYYY-MM-DD)로 변환"""
    return value.strftime(ISO_DATE_FORMAT)


def format_day_br(value: date) -> str:
    """date를 DD/MM/YYYY 문자열로 변환"""
    return value.strftime(BR_DATE_FORMAT)


def format_day_utc(value: date, tz: timezone) -> str:
    """장부 타임존 자정을 UTC ISO datetime 문자열로 변환

    parse_day(…, tz)에 다시 넣으면 같은 날짜가 됨.

    Example:
        >>> format_day_utc(date(2026, 10, 19), ledger_timezone(-3))
        '2026-10-19T03:00:00.000Z'
    """
    midnight = datetime.combine(value, time.min, tzinfo=tz)
    return midnight.astimezone(timezone.utc).strftime(UTC_DATETIME_FORMAT)
