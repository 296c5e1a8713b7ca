"""
Calendário de pedidos: agrupa pedidos e entregas por dia do mês
"""

import calendar
import logging
from datetime import date
from typing import Dict, Optional, Sequence, Tuple

from app.core.models import Pedido
from app.services.analytics.modelos import DiaCalendario, VisaoMensal

logger = logging.getLogger(__name__)

NOMES_MESES = [
    'Janeiro', 'Fevereiro', 'Março', 'Abril', 'Maio', 'Junho',
    'Julho', 'Agosto', 'Setembro', 'Outubro', 'Novembro', 'Dezembro'
]

NOMES_DIAS = ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb']


def _validar_mes(mes: int) -> None:
    if not 1 <= mes <= 12:
        raise ValueError(f"Mês inválido: {mes}")


def dimensoes_mes(ano: int, mes: int) -> Tuple[int, int]:
    """
    Formato da grade do mês.

    Returns:
        Tupla (dia da semana do dia 1 com domingo = 0, total de dias do mês)
    """
    _validar_mes(mes)
    # calendar.monthrange usa segunda = 0; a grade começa no domingo
    dia_semana, total_dias = calendar.monthrange(ano, mes)
    return (dia_semana + 1) % 7, total_dias


def _no_mes(data: Optional[date], ano: int, mes: int) -> bool:
    return data is not None and data.year == ano and data.month == mes


def montar_visao_mensal(pedidos: Sequence[Pedido], ano: int, mes: int) -> VisaoMensal:
    """
    Monta a visão mensal do calendário.

    Um pedido entra na lista de pedidos do dia da data do pedido e na lista de
    entregas do dia da data de entrega, desde que a data caia no mês exibido.
    Pedidos com data inválida (None) não aparecem.
    """
    primeiro_dia_semana, total_dias = dimensoes_mes(ano, mes)
    dias: Dict[int, DiaCalendario] = {dia: DiaCalendario(dia=dia) for dia in range(1, total_dias + 1)}

    for p in pedidos:
        if _no_mes(p.data_pedido, ano, mes):
            dias[p.data_pedido.day].pedidos.append(p)
        if _no_mes(p.data_entrega, ano, mes):
            dias[p.data_entrega.day].entregas.append(p)

    return VisaoMensal(
        ano=ano,
        mes=mes,
        total_dias=total_dias,
        primeiro_dia_semana=primeiro_dia_semana,
        dias=dias,
    )


def navegar_mes(ano: int, mes: int, direcao: int) -> Tuple[int, int]:
    """
    Avança (direcao > 0) ou volta (direcao < 0) meses, virando o ano em dez/jan.
    """
    _validar_mes(mes)
    indice = ano * 12 + (mes - 1) + direcao
    return indice // 12, indice % 12 + 1
