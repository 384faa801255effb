"""
로깅 설정

프로세스 공통 루트 로거 구성:
- 콘솔 (stdout)
- 파일: logs/<process>/<process>.log, 매일 자정 롤링

사용법:
    from core.logging import setup_logging
    setup_logging("web")
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 일 단위 보관 개수

# WARNING 이상만 남길 라이브러리 로거
NOISY_LOGGERS = (
    "aiosqlite",         # 쿼리마다 executing/completed
    "httpcore",
    "httpx",
    "asyncio",
    "uvicorn.access",    # 요청마다 한 줄
)

# setup_logging이 붙인 핸들러 표식 (재호출 시 이것만 교체)
_HANDLER_MARK = "_ledger_handler"


def get_log_dir(process_name: str) -> Path:
    """프로세스별 로그 디렉토리"""
    if process_name == "web":
        return Paths.WEB_LOGS_DIR
    return Paths.LOGS_DIR


def get_log_file_path(process_name: str) -> Path:
    """프로세스 기본 로그 파일 경로"""
    return get_log_dir(process_name) / f"{process_name}.log"


def _mark(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARK, True)
    return handler


def setup_logging(
    process_name: str,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거에 콘솔/파일 핸들러 설정

    여러 번 호출해도 핸들러가 쌓이지 않음 (이전에 붙인 핸들러 교체).
    pytest 등 외부에서 붙인 핸들러는 그대로 둠.

    Args:
        process_name: 프로세스 이름 (로그 파일명)
        console_level: 콘솔 레벨
        file_level: 파일 레벨
        log_dir: 로그 디렉토리 (None이면 get_log_dir)

    Returns:
        루트 Logger
    """
    log_dir = log_dir or get_log_dir(process_name)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{process_name}.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # 필터링은 핸들러 레벨에서

    for handler in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.suffix = "%Y-%m-%d"  # web.log.2026-10-19

    root.addHandler(_mark(logging.StreamHandler(sys.stdout), console_level, formatter))
    root.addHandler(_mark(file_handler, file_level, formatter))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.info(
        f"로깅 초기화: {process_name} "
        f"(console={logging.getLevelName(console_level)}, "
        f"file={log_file} {logging.getLevelName(file_level)})"
    )
    return root
