"""
Dependências compartilhadas pelas rotas
"""

import logging

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db import get_db
from app.services.repositorios.base import RepositorioPedidos
from app.services.repositorios.planilha import ClientePlanilhaPedidos
from app.services.repositorios.sql import RepositorioPedidosSQL

logger = logging.getLogger(__name__)


def get_repositorio(db: Session = Depends(get_db)) -> RepositorioPedidos:
    """
    Origem dos pedidos conforme PEDIDOS_BACKEND.
    Usar com Depends(get_repositorio) no FastAPI.
    """
    if settings.pedidos_backend == "planilha":
        if not settings.planilha_url:
            logger.error("PEDIDOS_BACKEND=planilha mas PLANILHA_URL não foi configurada")
            raise HTTPException(status_code=500, detail="URL da planilha não configurada")
        return ClientePlanilhaPedidos(settings.planilha_url, timeout=settings.planilha_timeout)

    return RepositorioPedidosSQL(db)
