"""
요청 스키마 (Pydantic)

Web API 요청 데이터 파싱.
필드명은 외부 API 그대로 (포르투갈어).
필수 여부/값 검증은 core.ledger.validation에서 수행하여
오류 메시지를 {"error": ...} 형식으로 통일.
"""

from pydantic import BaseModel, Field

from core.constants import MAX_ROW_ID
from core.ledger.types import TransactionInput


class AccountRequest(BaseModel):
    """계정 생성/이름 변경 요청"""

    nome: str | None = Field(default=None, description="계정명")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"nome": "Nova conta criada"},
            ]
        }
    }


class TransactionRequest(BaseModel):
    """거래 생성/수정 요청

    수정 시 빠진 필드는 기존 값 유지.
    조회 응답을 그대로 되돌려 보내도 되도록 알 수 없는 필드(id 등)는 무시.
    """

    tipo: str | None = Field(default=None, description="거래 유형 (REC/DESP)")
    status: bool | None = Field(default=None, description="settled 여부")
    conta_id: int | None = Field(default=None, ge=1, le=MAX_ROW_ID, description="계정 ID")
    descricao: str | None = Field(default=None, description="설명")
    valor: str | int | float | None = Field(default=None, description="금액 (양수)")
    envolvido: str | None = Field(default=None, description="거래 상대방")
    data_transacao: str | None = Field(
        default=None,
        description="거래일 (DD/MM/YYYY 또는 ISO)",
    )
    data_pagamento: str | None = Field(
        default=None,
        description="지급일 (DD/MM/YYYY 또는 ISO)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tipo": "REC",
                    "status": True,
                    "conta_id": 1,
                    "descricao": "Transacao inserida via API",
                    "valor": 32.99,
                    "envolvido": "Nome do interessado",
                    "data_transacao": "19/10/2026",
                    "data_pagamento": "20/10/2026",
                }
            ]
        }
    }

    def to_input(self) -> TransactionInput:
        """core 입력 모델로 변환"""
        return TransactionInput(
            account_id=self.conta_id,
            kind=self.tipo,
            settled=self.status,
            description=self.descricao,
            amount=self.valor,
            counterparty=self.envolvido,
            transaction_date=self.data_transacao,
            payment_date=self.data_pagamento,
        )
