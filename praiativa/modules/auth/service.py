# praiativa/modules/auth/service.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from praiativa.modules.profiles.models import Profile
from praiativa.modules.users.models import User

logger = logging.getLogger(__name__)


async def create_profile_best_effort(db: AsyncSession, user: User, nome: str, contato: str) -> bool:
    """
    Cria o perfil ligado ao usuário recém-cadastrado.
    Falha aqui é só logada: o cadastro segue valendo.
    """
    try:
        db.add(Profile(user_id=user.id, nome=nome, contato=contato))
        await db.commit()
        return True
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("[AUTH] Erro ao criar perfil do usuário %s", user.id)
        return False
