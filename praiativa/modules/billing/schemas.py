from __future__ import annotations
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Literal, Optional

TipoPagamento = Literal["pix", "link", "boleto"]

class BillingSessionIn(BaseModel):
    aluno_id: int
    instrutor_id: int
    data_emissao: Optional[str] = None    # YYYY-MM-DD
    data_vencimento: Optional[str] = None  # YYYY-MM-DD
    tipo_pagamento: TipoPagamento = "link"

class BillingSummaryOut(BaseModel):
    aluno: str
    valor: Decimal
    data_emissao: str
    data_vencimento: str
    valor_formatado: str
    data_emissao_formatada: str
    data_vencimento_formatada: str

class BillingSessionOut(BaseModel):
    url: str
    session_id: str
    resumo: BillingSummaryOut = Field(description="Dados para o toast de confirmação")
