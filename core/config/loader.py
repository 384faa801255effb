"""
설정 로더

settings.yaml 로드 및 애플리케이션 설정 생성
"""

from dataclasses import dataclass
from datetime import timezone
from pathlib import Path
from typing import Any

import yaml

from core.constants import PROJECT_ROOT, Defaults, Paths
from core.types import DeleteMode
from core.utils.timezone import ledger_timezone


@dataclass(frozen=True)
class WebConfig:
    """Web 서버 설정"""

    host: str
    port: int


@dataclass(frozen=True)
class LedgerConfig:
    """장부 동작 설정

    불변 데이터 구조로 설정 변경 방지
    """

    utc_offset_hours: int
    case_sensitive_names: bool
    delete_mode: DeleteMode
    allow_reset: bool

    @property
    def tz(self) -> timezone:
        """잔액 기준일 계산에 사용하는 타임존"""
        return ledger_timezone(self.utc_offset_hours)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)"""

    db_path: Path
    web: WebConfig
    ledger: LedgerConfig


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """선택 섹션 조회 (없으면 빈 dict)"""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"settings.yaml의 '{name}' 섹션 형식이 잘못되었습니다")
    return section


def _flag(section: dict[str, Any], key: str, default: bool) -> bool:
    """bool 설정 조회 ("false" 같은 문자열은 거부)"""
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigLoadError(
            f"{key}는 true/false여야 합니다: {value!r}"
        )
    return value


def _resolve_db_path(raw: str | None) -> Path:
    """DB 경로 해석 (상대 경로는 프로젝트 루트 기준)"""
    if not raw:
        return Paths.DEFAULT_DB

    path = Path(raw)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def load_config(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 delete_mode인 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise ConfigLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        raise ConfigLoadError("settings.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    database = _section(data, "database")
    web = _section(data, "web")
    ledger = _section(data, "ledger")

    # delete_mode 검증
    mode_str = str(ledger.get("delete_mode", Defaults.DELETE_MODE)).lower()
    try:
        delete_mode = DeleteMode(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in DeleteMode]
        raise ValueError(
            f"유효하지 않은 delete_mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    try:
        port = int(web.get("port", Defaults.WEB_PORT))
        utc_offset_hours = int(ledger.get("utc_offset_hours", Defaults.UTC_OFFSET_HOURS))
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"settings.yaml 숫자 설정이 잘못되었습니다: {e}") from e

    if not -12 <= utc_offset_hours <= 14:
        raise ConfigLoadError(
            f"utc_offset_hours 범위 초과: {utc_offset_hours} (-12 ~ 14)"
        )

    return AppConfig(
        db_path=_resolve_db_path(database.get("path")),
        web=WebConfig(
            host=str(web.get("host", Defaults.WEB_HOST)),
            port=port,
        ),
        ledger=LedgerConfig(
            utc_offset_hours=utc_offset_hours,
            case_sensitive_names=_flag(
                ledger, "case_sensitive_names", Defaults.CASE_SENSITIVE_NAMES
            ),
            delete_mode=delete_mode,
            allow_reset=_flag(ledger, "allow_reset", Defaults.ALLOW_RESET),
        ),
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_config(settings_path)

    @property
    def db_path(self) -> Path:
        """SQLite DB 경로"""
        assert self._config is not None
        return self._config.db_path

    @property
    def web(self) -> WebConfig:
        """Web 서버 설정"""
        assert self._config is not None
        return self._config.web

    @property
    def ledger(self) -> LedgerConfig:
        """장부 동작 설정"""
        assert self._config is not None
        return self._config.ledger

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
