"""
Painel de Pedidos - Personalizados
API principal FastAPI
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.db import init_db
from app.api.routes_pedidos import router as pedidos_router
from app.api.routes_painel import router as painel_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Painel de Pedidos",
    description="Pedidos, estatísticas, gráficos e calendário de entregas",
    version="1.0.0",
    redirect_slashes=False  # Evita redirect 307 de /pedidos para /pedidos/
)

# CORS - DEVE estar antes de include_router
cors_origins_str = os.getenv("CORS_ORIGINS") or settings.cors_origins
cors_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]
logger.info(f"CORS origins list: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Inicializa banco de dados na startup
@app.on_event("startup")
async def on_startup():
    """Inicializa banco de dados na startup (somente com origem local)"""
    if settings.pedidos_backend == "sql":
        init_db()
    logger.info(f"Origem dos pedidos: {settings.pedidos_backend}")


# Rotas
app.include_router(pedidos_router)
app.include_router(painel_router)


@app.get("/health")
async def health_check():
    """Endpoint de saúde da API"""
    return {
        "status": "ok",
        "service": "Painel de Pedidos",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Endpoint raiz"""
    return {
        "message": "Painel de Pedidos - Personalizados",
        "docs": "/docs",
        "endpoints": {
            "pedidos": "/pedidos",
            "estatisticas": "/pedidos/stats",
            "graficos": "/painel/graficos",
            "calendario": "/painel/calendario",
            "health": "/health"
        }
    }
