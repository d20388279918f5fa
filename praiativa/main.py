# praiativa/main.py
import sys
import asyncio

# Event loop compatível no Windows (safe em outros SOs também)
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from contextlib import asynccontextmanager
import json
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from praiativa.core.config import settings
from praiativa.core.logging import configure_logging
from praiativa.api.v1.router import api_router
from praiativa.db.session import engine
from praiativa.db.models import Base

configure_logging()
logger = logging.getLogger(__name__)


def _normalize_origins(value) -> list[str]:
    """Aceita lista, JSON string ou CSV e devolve lista de origens."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(o).strip() for o in value if str(o).strip()]
    if isinstance(value, str):
        # tenta JSON primeiro
        try:
            as_json = json.loads(value)
            if isinstance(as_json, (list, tuple)):
                return [str(o).strip() for o in as_json if str(o).strip()]
        except ValueError:
            pass
        # fallback: CSV
        return [o.strip() for o in value.split(",") if o.strip()]
    return [str(value).strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Em desenvolvimento, cria as tabelas automaticamente."""
    env = (settings.ENVIRONMENT or "").lower().strip()
    if env == "dev":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tabelas verificadas/criadas (%s)", engine.url.get_backend_name())
    yield
    await engine.dispose()


app = FastAPI(title="PraiAtiva Backend", lifespan=lifespan)

# --- CORS (antes dos routers) ---
origins = _normalize_origins(settings.CORS_ORIGINS)
if not origins:
    origins = [
        "http://localhost:8080",
        "http://localhost:5173",
        settings.FRONTEND_URL,
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


app.include_router(api_router, prefix=settings.API_V1_PREFIX)
