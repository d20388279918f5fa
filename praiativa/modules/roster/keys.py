# praiativa/modules/roster/keys.py
"""
Chaves de vínculo aluno -> instrutor.

Convivem dois esquemas sem migração:
  - legado: aluno.contato_instrutor (int) == instrutor.instrutor_id
  - novo:   aluno.numero_instrutor (str) == instrutor.instrutor_numero

As chaves são resolvidas uma vez aqui; o resto do código só chama `links()`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def _text_key(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None  # string vazia nunca vira chave


def _int_key(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    try:
        return int(str(v).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class InstructorKey:
    instrutor_id: Optional[int]
    instrutor_numero: Optional[str]

    @classmethod
    def of(cls, instrutor: Any) -> "InstructorKey":
        return cls(
            instrutor_id=_int_key(getattr(instrutor, "instrutor_id", None)),
            instrutor_numero=_text_key(getattr(instrutor, "instrutor_numero", None)),
        )


@dataclass(frozen=True)
class RosterKey:
    contato_instrutor: Optional[int]
    numero_instrutor: Optional[str]

    @classmethod
    def of(cls, aluno: Any) -> "RosterKey":
        return cls(
            contato_instrutor=_int_key(getattr(aluno, "contato_instrutor", None)),
            numero_instrutor=_text_key(getattr(aluno, "numero_instrutor", None)),
        )

    def links(self, inst: InstructorKey) -> bool:
        by_numero = (
            self.numero_instrutor is not None
            and self.numero_instrutor == inst.instrutor_numero
        )
        by_legacy_id = (
            self.contato_instrutor is not None
            and self.contato_instrutor == inst.instrutor_id
        )
        return by_numero or by_legacy_id
