from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from praiativa.modules.profiles.schemas import ProfileOut

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    nome: Optional[str] = None
    contato: Optional[str] = None

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"

class MeOut(BaseModel):
    id: int
    email: str
    profile: Optional[ProfileOut] = None
