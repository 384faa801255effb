"""
core/logging.py 테스트
"""

import logging
from pathlib import Path

from core.constants import Paths
from core.logging import get_log_dir, get_log_file_path, setup_logging


def _ledger_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_ledger_handler", False)]


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_creates_log_file(self, temp_dir: Path) -> None:
        setup_logging("web", log_dir=temp_dir)

        logging.getLogger("test").info("hello")

        assert (temp_dir / "web.log").exists()

    def test_no_duplicate_handlers(self, temp_dir: Path) -> None:
        """반복 호출 시 핸들러 중복 없음"""
        setup_logging("web", log_dir=temp_dir)
        setup_logging("web", log_dir=temp_dir)

        assert len(_ledger_handlers()) == 2

    def test_noisy_loggers_lowered(self, temp_dir: Path) -> None:
        setup_logging("web", log_dir=temp_dir)

        assert logging.getLogger("aiosqlite").level == logging.WARNING


class TestLogPaths:
    """로그 경로 테스트"""

    def test_web_log_dir(self) -> None:
        assert get_log_dir("web") == Paths.WEB_LOGS_DIR

    def test_other_log_dir(self) -> None:
        assert get_log_dir("cli") == Paths.LOGS_DIR

    def test_log_file_path(self) -> None:
        assert get_log_file_path("web") == Paths.WEB_LOGS_DIR / "web.log"
