"""
pytest 공통 fixture 정의

설정 파일, 임시 디렉토리 fixture
"""

import tempfile
from pathlib import Path

import pytest

from core.config.loader import Settings


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (DB는 임시 디렉토리)"""
    db_path = (temp_dir / "ledger.db").as_posix()
    settings_content = f"""# 테스트용 settings.yaml
database:
  path: "{db_path}"

web:
  host: "127.0.0.1"
  port: 8123

ledger:
  utc_offset_hours: -3
  case_sensitive_names: true
  delete_mode: hard
  allow_reset: true
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 delete_mode의 settings.yaml 파일 생성"""
    settings_content = """ledger:
  delete_mode: archive
"""
    settings_path = temp_dir / "settings_invalid.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture(autouse=True)
def reset_settings_singleton():
    """테스트 간 Settings 싱글턴 격리"""
    Settings.reset()
    yield
    Settings.reset()
