"""
Serviço de orquestração do painel de pedidos

Cada chamada busca a coleção inteira na origem, normaliza e recalcula as
visões do zero. Não há cache nem atualização incremental.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from app.core.models import Pedido, StatusPedido
from app.core.normalizacao import normalizar_pedidos
from app.services.analytics import agregacoes
from app.services.analytics.modelos import PainelGraficos
from app.services.repositorios.base import RepositorioPedidos

logger = logging.getLogger(__name__)

STATUS_TODOS = "Todos"


def carregar_pedidos(
    repositorio: RepositorioPedidos,
    filtros: Optional[Dict[str, str]] = None
) -> Tuple[List[Pedido], List[str]]:
    """
    Busca os pedidos na origem e normaliza.

    Returns:
        Tupla (lista de Pedido, lista de issues da normalização)
    """
    registros = repositorio.listar(filtros)
    logger.info(f"{len(registros)} pedidos brutos carregados")
    return normalizar_pedidos(registros)


def filtrar_por_status(pedidos: Sequence[Pedido], status: Optional[str]) -> List[Pedido]:
    """Filtro da lista de pedidos: "Todos", "Pago" ou "Pendente" (status derivado)."""
    if not status or status == STATUS_TODOS:
        return list(pedidos)
    alvo = StatusPedido(status)
    return [p for p in pedidos if p.status is alvo]


def montar_graficos(pedidos: Sequence[Pedido]) -> PainelGraficos:
    """Calcula todas as séries da aba de gráficos."""
    return PainelGraficos(
        faturamento_mensal=agregacoes.faturamento_por_mes(pedidos),
        status=agregacoes.distribuicao_status(pedidos),
        pedidos_por_boleira=agregacoes.pedidos_por_boleira(pedidos),
        faturamento_por_boleira=agregacoes.faturamento_por_boleira(pedidos),
        pedidos_por_tipo=agregacoes.pedidos_por_tipo(pedidos),
        comparacao_por_boleira=agregacoes.comparacao_status_por_boleira(pedidos),
        pedidos_por_mes=agregacoes.pedidos_ao_longo_do_tempo(pedidos),
    )
