"""
Módulo de análise dos pedidos: agregações, calendário e resumo
"""

from app.services.analytics.agregacoes import (
    calcular_percentual,
    comparacao_status_por_boleira,
    distribuicao_status,
    faturamento_por_boleira,
    faturamento_por_mes,
    pedidos_ao_longo_do_tempo,
    pedidos_por_boleira,
    pedidos_por_categoria,
    pedidos_por_tipo,
)
from app.services.analytics.calendario import dimensoes_mes, montar_visao_mensal, navegar_mes
from app.services.analytics.resumo import resumir

__all__ = [
    "calcular_percentual",
    "comparacao_status_por_boleira",
    "distribuicao_status",
    "faturamento_por_boleira",
    "faturamento_por_mes",
    "pedidos_ao_longo_do_tempo",
    "pedidos_por_boleira",
    "pedidos_por_categoria",
    "pedidos_por_tipo",
    "dimensoes_mes",
    "montar_visao_mensal",
    "navegar_mes",
    "resumir",
]
