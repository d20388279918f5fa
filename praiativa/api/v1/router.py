# praiativa/api/v1/router.py
from fastapi import APIRouter
from praiativa.modules.auth.router import router as auth_router
from praiativa.modules.instrutores.router import router as instrutores_router
from praiativa.modules.alunos.router import router as alunos_router
from praiativa.modules.dashboard.router import router as dashboard_router
from praiativa.modules.billing.router import router as billing_router

api_router = APIRouter()

api_router.include_router(auth_router,        prefix="/auth",        tags=["auth"])
api_router.include_router(instrutores_router, prefix="/instrutores", tags=["instrutores"])
api_router.include_router(alunos_router,      prefix="/alunos",      tags=["alunos"])
api_router.include_router(dashboard_router,   prefix="/dashboard",   tags=["dashboard"])
api_router.include_router(billing_router,     prefix="/billing",     tags=["billing"])
