from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class InstrutorBase(BaseModel):
    nome: str = ""
    contato: Optional[str] = None
    atividade: Optional[str] = None
    valor: Optional[str] = None
    dia_horario: Optional[str] = None
    localizacao: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    banco: Optional[str] = None
    agencia: Optional[str] = None
    conta: Optional[str] = None
    chave_pix: Optional[str] = None

class InstrutorCreate(InstrutorBase):
    nome: str = Field(..., min_length=1)
    contato: str = Field(..., min_length=1)
    # se não vier, assume o próprio contato
    instrutor_numero: Optional[str] = None

class InstrutorOut(InstrutorBase):
    instrutor_id: int
    instrutor_numero: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)

class ValorPadraoIn(BaseModel):
    valor: Optional[str] = None
