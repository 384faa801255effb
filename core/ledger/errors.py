"""
장부 예외 정의

Web 계층에서 HTTP 상태 코드와 {"error": message} 응답으로 변환.
"""

from core.constants import Messages


class LedgerError(Exception):
    """장부 예외 기본 클래스

    Args:
        message: 클라이언트에 노출되는 메시지
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    """입력값 검증 실패 (필수 필드 누락, 형식 오류, 금액 <= 0 등)"""

    pass


class DuplicateNameError(ValidationError):
    """동일한 이름의 계정이 이미 존재"""

    def __init__(self, message: str = Messages.DUPLICATE_ACCOUNT_NAME):
        super().__init__(message)


class NotFoundError(LedgerError):
    """대상 계정/거래 없음"""

    pass


class OperationNotAllowedError(LedgerError):
    """설정으로 비활성화된 작업"""

    pass
