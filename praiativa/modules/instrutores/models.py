from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, ForeignKey
from praiativa.db.base import Base, TimestampMixin

class Instrutor(Base, TimestampMixin):
    __tablename__ = "praiativa_instrutores"

    instrutor_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # um instrutor por identidade autenticada
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), unique=True, index=True, nullable=True
    )

    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    contato: Mapped[str] = mapped_column(String(40), nullable=False)
    atividade: Mapped[str | None] = mapped_column(String(120), nullable=True)
    valor: Mapped[str | None] = mapped_column(String(20), nullable=True)
    dia_horario: Mapped[str | None] = mapped_column(String(200), nullable=True)
    localizacao: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # nasce igual ao contato, mas é gravado à parte e pode divergir
    instrutor_numero: Mapped[str | None] = mapped_column(String(40), nullable=True, index=True)

    cpf_cnpj: Mapped[str | None] = mapped_column(String(20), nullable=True)
    banco: Mapped[str | None] = mapped_column(String(100), nullable=True)
    agencia: Mapped[str | None] = mapped_column(String(20), nullable=True)
    conta: Mapped[str | None] = mapped_column(String(30), nullable=True)
    chave_pix: Mapped[str | None] = mapped_column(String(120), nullable=True)
