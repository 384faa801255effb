"""
core/utils/dates.py 테스트
"""

from datetime import date, datetime, timezone

import pytest

from core.utils.dates import format_day, format_day_br, format_day_utc, parse_day
from core.utils.timezone import ledger_timezone


class TestParseDay:
    """parse_day 테스트"""

    def test_br_format(self) -> None:
        """DD/MM/YYYY"""
        assert parse_day("31/01/2021") == date(2021, 1, 31)

    def test_iso_format(self) -> None:
        """YYYY-MM-DD"""
        assert parse_day("2021-01-31") == date(2021, 1, 31)

    def test_strips_whitespace(self) -> None:
        """앞뒤 공백 허용"""
        assert parse_day("  01/02/2021 ") == date(2021, 2, 1)

    def test_date_object(self) -> None:
        """date 객체 그대로"""
        assert parse_day(date(2021, 5, 1)) == date(2021, 5, 1)

    def test_iso_datetime_utc_to_ledger_tz(self) -> None:
        """UTC 자정 직후 값은 UTC-3 기준 전날"""
        tz = ledger_timezone(-3)

        assert parse_day("2021-01-01T02:00:00.000Z", tz) == date(2020, 12, 31)
        assert parse_day("2021-01-01T03:00:00.000Z", tz) == date(2021, 1, 1)

    def test_iso_datetime_without_tz(self) -> None:
        """tz 미지정 시 날짜만 취함"""
        assert parse_day("2021-01-01T02:00:00Z") == date(2021, 1, 1)

    def test_aware_datetime_object(self) -> None:
        """tz 있는 datetime 객체"""
        value = datetime(2021, 3, 1, 1, 0, tzinfo=timezone.utc)

        assert parse_day(value, ledger_timezone(-3)) == date(2021, 2, 28)

    @pytest.mark.parametrize("value", ["", "   ", "31/13/2021", "amanhã", "2021/01/01"])
    def test_invalid(self, value: str) -> None:
        """해석할 수 없는 값"""
        with pytest.raises(ValueError):
            parse_day(value)

    def test_non_string(self) -> None:
        """문자열/날짜가 아닌 값"""
        with pytest.raises(ValueError):
            parse_day(20210101)  # type: ignore[arg-type]


class TestFormatDay:
    """format_day / format_day_br 테스트"""

    def test_format_iso(self) -> None:
        assert format_day(date(2021, 1, 5)) == "2021-01-05"

    def test_format_br(self) -> None:
        assert format_day_br(date(2021, 1, 5)) == "05/01/2021"

    def test_format_utc_midnight(self) -> None:
        """UTC-3 자정 → 03:00Z"""
        tz = ledger_timezone(-3)

        assert format_day_utc(date(2026, 10, 19), tz) == "2026-10-19T03:00:00.000Z"

    def test_format_utc_positive_offset(self) -> None:
        """UTC+9 자정 → 전날 15:00Z"""
        tz = ledger_timezone(9)

        assert format_day_utc(date(2026, 10, 19), tz) == "2026-10-18T15:00:00.000Z"

    @pytest.mark.parametrize("offset", [-3, 0, 9])
    def test_format_utc_parses_back(self, offset: int) -> None:
        """format_day_utc 결과를 parse_day에 넣으면 같은 날짜"""
        tz = ledger_timezone(offset)
        day = date(2021, 1, 1)

        assert parse_day(format_day_utc(day, tz), tz) == day
