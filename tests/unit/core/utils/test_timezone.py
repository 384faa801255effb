"""
core/utils/timezone.py 테스트
"""

from datetime import date, datetime, timedelta, timezone

from core.utils.timezone import ledger_timezone, now_utc, to_local, today_in


class TestLedgerTimezone:
    """ledger_timezone 테스트"""

    def test_offset(self) -> None:
        tz = ledger_timezone(-3)

        assert tz.utcoffset(None) == timedelta(hours=-3)

    def test_zero_offset(self) -> None:
        assert ledger_timezone(0).utcoffset(None) == timedelta(0)


class TestNowUtc:
    """now_utc 테스트"""

    def test_is_aware(self) -> None:
        now = now_utc()

        assert now.tzinfo == timezone.utc


class TestToLocal:
    """to_local 테스트"""

    def test_naive_treated_as_utc(self) -> None:
        """naive datetime은 UTC로 간주"""
        local = to_local(datetime(2021, 1, 1, 2, 0), ledger_timezone(-3))

        assert local == datetime(2020, 12, 31, 23, 0, tzinfo=ledger_timezone(-3))

    def test_aware(self) -> None:
        source = datetime(2021, 1, 1, 12, 0, tzinfo=timezone.utc)

        assert to_local(source, ledger_timezone(-3)).hour == 9


class TestTodayIn:
    """today_in 테스트"""

    def test_day_boundary(self) -> None:
        """UTC 01:00 = UTC-3 전날 22:00"""
        now = datetime(2026, 2, 21, 1, 0, tzinfo=timezone.utc)

        assert today_in(ledger_timezone(-3), now) == date(2026, 2, 20)

    def test_same_day(self) -> None:
        now = datetime(2026, 2, 21, 15, 0, tzinfo=timezone.utc)

        assert today_in(ledger_timezone(-3), now) == date(2026, 2, 21)

    def test_default_now(self) -> None:
        """now 생략 시 현재 시각 사용"""
        assert isinstance(today_in(ledger_timezone(-3)), date)
