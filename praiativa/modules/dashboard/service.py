# praiativa/modules/dashboard/service.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from praiativa.core.results import Failure, FailureKind, Ok, Result
from praiativa.modules.alunos import crud as alunos_crud
from praiativa.modules.alunos.schemas import AlunoOut
from praiativa.modules.instrutores import crud as instrutores_crud
from praiativa.modules.instrutores.schemas import InstrutorOut

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    instrutores: List[InstrutorOut]
    alunos: List[AlunoOut]


async def load_snapshot(db: AsyncSession) -> Result[Snapshot]:
    """Instrutores e alunos, mais recentes primeiro. Sem cache entre chamadas."""
    try:
        instrutores = await instrutores_crud.list_instrutores(db)
        alunos = await alunos_crud.list_alunos(db)
    except SQLAlchemyError as e:
        logger.exception("[DASHBOARD] Erro ao carregar dados")
        return Failure(FailureKind.STORE_ERROR, "Erro ao carregar dados do dashboard", details=str(e))
    return Ok(Snapshot(
        instrutores=[InstrutorOut.model_validate(i) for i in instrutores],
        alunos=[AlunoOut.model_validate(a) for a in alunos],
    ))
