"""
유틸리티 패키지

타임존 처리, 날짜 변환 등 공통 유틸리티
"""

from core.utils.dates import (
    BR_DATE_FORMAT,
    ISO_DATE_FORMAT,
    parse_day,
    format_day,
    format_day_br,
    format_day_utc,
)
from core.utils.timezone import (
    ledger_timezone,
    now_utc,
    to_local,
    today_in,
)

__all__ = [
    "BR_DATE_FORMAT",
    "ISO_DATE_FORMAT",
    "parse_day",
    "format_day",
    "format_day_br",
    "format_day_utc",
    "ledger_timezone",
    "now_utc",
    "to_local",
    "today_in",
]
