"""
Origens de pedidos: planilha (Google Apps Script) e banco local
"""

from app.services.repositorios.base import ErroApiPedidos, RepositorioPedidos
from app.services.repositorios.planilha import ClientePlanilhaPedidos
from app.services.repositorios.sql import RepositorioPedidosSQL

__all__ = [
    "ErroApiPedidos",
    "RepositorioPedidos",
    "ClientePlanilhaPedidos",
    "RepositorioPedidosSQL",
]
