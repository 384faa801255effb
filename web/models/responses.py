"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 소수점 2자리 문자열, 날짜는 ISO(YYYY-MM-DD) 문자열.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="API 버전")


class ErrorResponse(BaseModel):
    """오류 응답"""

    error: str = Field(..., description="오류 메시지")


class AccountResponse(BaseModel):
    """계정 응답"""

    id: int = Field(..., description="계정 ID")
    nome: str = Field(..., description="계정명")


class TransactionResponse(BaseModel):
    """거래 응답"""

    id: int = Field(..., description="거래 ID")
    conta_id: int = Field(..., description="계정 ID")
    tipo: str = Field(..., description="거래 유형 (REC/DESP)")
    status: bool = Field(..., description="settled 여부")
    descricao: str = Field(..., description="설명")
    valor: str = Field(..., description="금액 (예: '32.99')")
    envolvido: str = Field(..., description="거래 상대방")
    data_transacao: str = Field(..., description="거래일 (장부 타임존 자정, UTC ISO)")
    data_pagamento: str = Field(..., description="지급일 (장부 타임존 자정, UTC ISO)")


class BalanceResponse(BaseModel):
    """계정별 잔액 응답"""

    conta_id: int = Field(..., description="계정 ID")
    conta: str = Field(..., description="계정명")
    saldo: str = Field(..., description="잔액 (예: '534.00')")


class ResetResponse(BaseModel):
    """데이터 초기화 응답"""

    status: str = Field(default="ok", description="처리 결과")
    contas: int = Field(..., description="생성된 계정 수")
    transacoes: int = Field(..., description="생성된 거래 수")
