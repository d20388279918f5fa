from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, ForeignKey
from praiativa.db.base import Base, TimestampMixin

class Profile(Base, TimestampMixin):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False
    )
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    contato: Mapped[str] = mapped_column(String(40), nullable=False)
