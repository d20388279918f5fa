# praiativa/modules/instrutores/crud.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from .models import Instrutor

async def list_instrutores(db: AsyncSession) -> list[Instrutor]:
    res = await db.execute(
        select(Instrutor).order_by(Instrutor.created_at.desc(), Instrutor.instrutor_id.desc())
    )
    return list(res.scalars().all())

async def get_instrutor(db: AsyncSession, instrutor_id: int) -> Instrutor | None:
    res = await db.execute(select(Instrutor).where(Instrutor.instrutor_id == instrutor_id))
    return res.scalar_one_or_none()

async def get_instrutor_by_user(db: AsyncSession, user_id: int) -> Instrutor | None:
    res = await db.execute(select(Instrutor).where(Instrutor.user_id == user_id))
    return res.scalar_one_or_none()

async def update_valor(db: AsyncSession, instrutor_id: int, valor: str) -> bool:
    res = await db.execute(
        update(Instrutor).where(Instrutor.instrutor_id == instrutor_id).values(valor=valor)
    )
    await db.commit()
    return (res.rowcount or 0) > 0
