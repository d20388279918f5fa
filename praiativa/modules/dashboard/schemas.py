from __future__ import annotations
from pydantic import BaseModel
from typing import List, Optional

from praiativa.modules.instrutores.schemas import InstrutorOut
from praiativa.modules.alunos.schemas import AlunoOut

class DashboardOut(BaseModel):
    instrutores: List[InstrutorOut]
    alunos: List[AlunoOut]
    selecionado: Optional[InstrutorOut] = None
    roster: List[AlunoOut]
