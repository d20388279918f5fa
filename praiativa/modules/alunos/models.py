from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Date, Numeric
from praiativa.db.base import Base, TimestampMixin

class Aluno(Base, TimestampMixin):
    __tablename__ = "praiativa_alunos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    contato: Mapped[str | None] = mapped_column(String(40), nullable=True)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(String(40), nullable=True)
    atividade: Mapped[str | None] = mapped_column(String(120), nullable=True)

    valor: Mapped[str | None] = mapped_column(String(20), nullable=True)
    valor_mensalidade: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    validade: Mapped[date | None] = mapped_column(Date, nullable=True)

    # vínculo legado: id numérico do instrutor (sem FK, registros antigos)
    contato_instrutor: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    # vínculo novo: instrutor_numero do instrutor
    numero_instrutor: Mapped[str | None] = mapped_column(String(40), nullable=True, index=True)
