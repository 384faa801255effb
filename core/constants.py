"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → conta-ledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

APP_VERSION: str = "1.0.0"

# 행 ID 상한 (SQLite INTEGER = 64비트 부호 있는 정수)
MAX_ROW_ID: int = 2**63 - 1


class Defaults:
    """기본값 상수 (settings.yaml에 값이 없을 때 사용)"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    # 브라질 표준시 (UTC-3, 서머타임 없음)
    UTC_OFFSET_HOURS: int = -3
    CASE_SENSITIVE_NAMES: bool = True
    DELETE_MODE: str = "hard"
    ALLOW_RESET: bool = True

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    DEFAULT_DB: Path = DATA_DIR / "ledger.db"


class Messages:
    """API 오류 메시지 (클라이언트에 그대로 노출)"""

    DUPLICATE_ACCOUNT_NAME: str = "Já existe uma conta com esse nome!"
    ACCOUNT_NOT_FOUND: str = "Conta não encontrada"
    TRANSACTION_NOT_FOUND: str = "Transação não encontrada"
    ACCOUNT_HAS_TRANSACTIONS: str = "Esta conta possui transações associadas"
    RESET_DISABLED: str = "Reset de dados desabilitado"

    NAME_REQUIRED: str = "Nome é um atributo obrigatório"
    KIND_REQUIRED: str = "Tipo é um atributo obrigatório"
    KIND_INVALID: str = "Tipo inválido (REC ou DESP)"
    ACCOUNT_REQUIRED: str = "Conta é um atributo obrigatório"
    ACCOUNT_INVALID: str = "Conta inexistente"
    DESCRIPTION_REQUIRED: str = "Descrição é um atributo obrigatório"
    COUNTERPARTY_REQUIRED: str = "Interessado é um atributo obrigatório"
    AMOUNT_REQUIRED: str = "Valor é um atributo obrigatório"
    AMOUNT_INVALID: str = "Valor inválido"
    AMOUNT_NOT_POSITIVE: str = "Valor deve ser maior que zero"
    TRANSACTION_DATE_REQUIRED: str = "Data da Movimentação é um atributo obrigatório"
    TRANSACTION_DATE_INVALID: str = "Data da Movimentação inválida (DD/MM/YYYY)"
    PAYMENT_DATE_REQUIRED: str = "Data do pagamento é um atributo obrigatório"
    PAYMENT_DATE_INVALID: str = "Data do pagamento inválida (DD/MM/YYYY)"
    MALFORMED_REQUEST: str = "Requisição inválida"
