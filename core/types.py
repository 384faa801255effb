"""
타입 정의 모듈

애플리케이션 전역에서 사용하는 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class DeleteMode(str, Enum):
    """삭제 방식

    HARD: 레코드 물리 삭제
    SOFT: deleted_at 기록 후 조회에서 제외
    """

    HARD = "hard"
    SOFT = "soft"
