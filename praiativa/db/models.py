# praiativa/db/models.py
# importa todos os models para registrar as tabelas em Base.metadata
from praiativa.db.base import Base  # noqa: F401
from praiativa.modules.users.models import User  # noqa: F401
from praiativa.modules.profiles.models import Profile  # noqa: F401
from praiativa.modules.instrutores.models import Instrutor  # noqa: F401
from praiativa.modules.alunos.models import Aluno  # noqa: F401
