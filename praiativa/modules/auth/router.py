from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from praiativa.core.dependencies import get_db, get_current_user
from praiativa.core.security import hash_password, verify_password, create_access_token
from praiativa.modules.users.models import User
from praiativa.modules.profiles.models import Profile
from praiativa.modules.profiles.schemas import ProfileOut
from .schemas import LoginRequest, SignupRequest, TokenOut, MeOut
from .service import create_profile_best_effort

router = APIRouter()

def _token_for(user: User) -> TokenOut:
    return TokenOut(access_token=create_access_token(user.id))

@router.post("/signup", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, db: AsyncSession = Depends(get_db)):
    nome = (payload.nome or "").strip()
    contato = (payload.contato or "").strip()
    if not nome or not contato:
        raise HTTPException(status_code=400, detail="Nome e contato são obrigatórios para cadastro")

    email = payload.email.strip().lower()
    exists = await db.execute(select(User.id).where(User.email == email))
    if exists.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="E-mail já cadastrado")

    user = User(email=email, senha_hash=hash_password(payload.password))
    db.add(user)
    await db.commit()
    await db.refresh(user)

    await create_profile_best_effort(db, user, nome, contato)
    return _token_for(user)

@router.post("/login", response_model=TokenOut)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    q = await db.execute(select(User).where(User.email == payload.email.strip().lower()))
    user = q.scalar_one_or_none()
    if not user or not verify_password(payload.password, user.senha_hash):
        raise HTTPException(status_code=401, detail="Credenciais inválidas")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Usuário inativo")
    return _token_for(user)

@router.get("/me", response_model=MeOut)
async def me(user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    q = await db.execute(select(Profile).where(Profile.user_id == user.id))
    profile = q.scalar_one_or_none()
    return MeOut(
        id=user.id,
        email=user.email,
        profile=ProfileOut.model_validate(profile) if profile else None,
    )
