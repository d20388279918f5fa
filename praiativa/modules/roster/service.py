# praiativa/modules/roster/service.py
from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from praiativa.core.results import Failure, FailureKind, Ok, Result
from praiativa.modules.instrutores import crud as instrutores_crud
from .keys import InstructorKey, RosterKey

logger = logging.getLogger(__name__)

StudentT = TypeVar("StudentT")
InstT = TypeVar("InstT")


def resolve_roster(
    instructors: Sequence[InstT],
    students: Sequence[StudentT],
    selected: Optional[InstT],
) -> list[StudentT]:
    """
    Alunos do instrutor selecionado, na ordem recebida do banco.

    Um aluno pertence ao instrutor se numero_instrutor == instrutor_numero
    OU contato_instrutor == instrutor_id. Sem instrutor selecionado: [].
    """
    if selected is None:
        return []
    inst = InstructorKey.of(selected)
    return [s for s in students if RosterKey.of(s).links(inst)]


def select_instructor(instructors: Sequence[InstT], instrutor_id: Optional[int]) -> Optional[InstT]:
    if instrutor_id is None:
        return None
    return next(
        (i for i in instructors if getattr(i, "instrutor_id", None) == instrutor_id),
        None,
    )


async def update_default_price(
    db: AsyncSession, instrutor_id: int, novo_valor: Optional[str]
) -> Result[None]:
    """
    Atualiza o valor padrão do instrutor. Não toca o banco se o valor vier vazio.
    Quem chama deve recarregar o snapshot (instrutores + alunos) depois.
    """
    valor = (novo_valor or "").strip()
    if not valor:
        return Failure(FailureKind.MISSING_PRICE, "Informe o valor padrão")

    try:
        updated = await instrutores_crud.update_valor(db, instrutor_id, valor)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("[DASHBOARD] Erro ao atualizar valor do instrutor %s", instrutor_id)
        return Failure(FailureKind.STORE_ERROR, "Erro ao atualizar valor padrão", details=str(e))

    if not updated:
        return Failure(FailureKind.STORE_ERROR, f"Instrutor {instrutor_id} não encontrado")
    logger.info("[DASHBOARD] Valor padrão do instrutor %s atualizado para %s", instrutor_id, valor)
    return Ok(None)
