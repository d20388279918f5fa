# praiativa/modules/alunos/crud.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .models import Aluno

async def list_alunos(db: AsyncSession) -> list[Aluno]:
    res = await db.execute(select(Aluno).order_by(Aluno.created_at.desc(), Aluno.id.desc()))
    return list(res.scalars().all())

async def get_aluno(db: AsyncSession, aluno_id: int) -> Aluno | None:
    res = await db.execute(select(Aluno).where(Aluno.id == aluno_id))
    return res.scalar_one_or_none()
