from __future__ import annotations
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import date
from typing import Optional

class AlunoBase(BaseModel):
    nome: str
    contato: Optional[str] = None
    email: Optional[EmailStr] = None
    whatsapp: Optional[str] = None
    atividade: Optional[str] = None
    valor: Optional[str] = None
    valor_mensalidade: Optional[float] = None
    validade: Optional[date] = None
    contato_instrutor: Optional[int] = None
    numero_instrutor: Optional[str] = None

class AlunoCreate(AlunoBase):
    nome: str = Field(..., min_length=1)

class AlunoOut(AlunoBase):
    id: Optional[int] = None
    # e-mails legados podem não validar; na leitura aceitamos qualquer texto
    email: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
