# praiativa/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import jwt
from passlib.context import CryptContext

from praiativa.core.config import settings

JWT_ALG = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(
    subject: int | str,
    *,
    expires_minutes: Optional[int] = None,
    secret_key: Optional[str] = None,
) -> str:
    """JWT com `sub` = id do usuário (a identidade que escolhe o "meu" instrutor)."""
    minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    claims = {
        "sub": str(subject),
        "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes),
    }
    return jwt.encode(claims, secret_key or settings.SECRET_KEY, algorithm=JWT_ALG)


def decode_token(token: str, secret_key: Optional[str] = None) -> dict[str, Any]:
    return jwt.decode(token, secret_key or settings.SECRET_KEY, algorithms=[JWT_ALG])
