from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from praiativa.api.v1.errors import http_error
from praiativa.core.dependencies import get_db, get_current_user
from praiativa.modules.users.models import User
from praiativa.modules.instrutores import crud as instrutores_crud
from praiativa.modules.roster.service import resolve_roster, select_instructor
from .schemas import DashboardOut
from .service import load_snapshot

router = APIRouter()

@router.get("", response_model=DashboardOut)
async def get_dashboard(
    instrutor_id: Optional[int] = Query(None, description="Instrutor selecionado (default: o do usuário)"),
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    result = await load_snapshot(db)
    if not result.ok:
        raise http_error(result)
    snap = result.value

    if instrutor_id is None:
        mine = await instrutores_crud.get_instrutor_by_user(db, me.id)
        instrutor_id = mine.instrutor_id if mine else None

    selecionado = select_instructor(snap.instrutores, instrutor_id)
    return DashboardOut(
        instrutores=snap.instrutores,
        alunos=snap.alunos,
        selecionado=selecionado,
        roster=resolve_roster(snap.instrutores, snap.alunos, selecionado),
    )
