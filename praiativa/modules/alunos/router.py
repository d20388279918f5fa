from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from praiativa.core.dependencies import get_db, get_current_user
from praiativa.modules.users.models import User
from . import crud
from .models import Aluno
from .schemas import AlunoCreate, AlunoOut

router = APIRouter()

@router.get("", response_model=list[AlunoOut])
async def list_alunos(
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    return await crud.list_alunos(db)

@router.post("", response_model=AlunoOut, status_code=status.HTTP_201_CREATED)
async def create_aluno(
    payload: AlunoCreate,
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    obj = Aluno(**payload.model_dump())
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj
