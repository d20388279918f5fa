from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from praiativa.api.v1.errors import http_error
from praiativa.core.dependencies import get_db, get_current_user
from praiativa.modules.users.models import User
from praiativa.modules.roster.service import update_default_price
from . import crud
from .models import Instrutor
from .schemas import InstrutorCreate, InstrutorOut, ValorPadraoIn

router = APIRouter()

@router.get("", response_model=list[InstrutorOut])
async def list_instrutores(
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    return await crud.list_instrutores(db)

@router.get("/me", response_model=InstrutorOut)
async def get_my_instrutor(
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    inst = await crud.get_instrutor_by_user(db, me.id)
    if not inst:
        raise HTTPException(status_code=404, detail="Instrutor não cadastrado para este usuário")
    return inst

@router.post("", response_model=InstrutorOut, status_code=status.HTTP_201_CREATED)
async def create_instrutor(
    payload: InstrutorCreate,
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    if await crud.get_instrutor_by_user(db, me.id):
        raise HTTPException(status_code=409, detail="Usuário já possui cadastro de instrutor")

    data = payload.model_dump()
    # instrutor_numero nasce igual ao contato
    data["instrutor_numero"] = (payload.instrutor_numero or "").strip() or payload.contato.strip()
    obj = Instrutor(**data, user_id=me.id)
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj

@router.put("/{instrutor_id}/valor", response_model=InstrutorOut)
async def atualizar_valor_padrao(
    instrutor_id: int,
    payload: ValorPadraoIn,
    db: AsyncSession = Depends(get_db),
    me: User = Depends(get_current_user),
):
    result = await update_default_price(db, instrutor_id, payload.valor)
    if not result.ok:
        raise http_error(result)
    # sempre relê do banco em vez de remendar o objeto em memória
    inst = await crud.get_instrutor(db, instrutor_id)
    if not inst:
        raise HTTPException(status_code=404, detail="Instrutor não encontrado")
    return inst
