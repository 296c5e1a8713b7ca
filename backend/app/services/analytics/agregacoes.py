"""
Motor de agregações dos pedidos (alimenta os gráficos do painel)

Todas as funções são puras: recebem a coleção de pedidos normalizados e
devolvem listas prontas para os gráficos. A ordenação usa sorted(), que é
estável: empates mantêm a ordem em que a categoria apareceu na coleção.
"""

import logging
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, List, Literal, Optional, Sequence

from app.core.models import Pedido, StatusPedido
from app.services.analytics.modelos import (
    ChaveMes,
    ComparacaoStatus,
    ContagemCategoria,
    ContagemMensal,
    FatiaDistribuicao,
    FaturamentoCategoria,
    FaturamentoMensal,
)

logger = logging.getLogger(__name__)

LIMITE_MESES = 12
LIMITE_BOLEIRAS = 10
LIMITE_COMPARACAO = 8

CampoCategoria = Literal["boleira", "tipo"]

_EXTRATORES: Dict[str, Callable[[Pedido], str]] = {
    "boleira": lambda p: p.categoria_boleira,
    "tipo": lambda p: p.categoria_tipo,
}


def calcular_percentual(valor, total) -> Decimal:
    """
    Percentual de valor sobre total (0-100, duas casas).
    Retorna 0 quando total é 0.
    """
    if not total:
        return Decimal("0")
    return (Decimal(valor) * 100 / Decimal(total)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _ultimos_periodos(acumulado: Dict[ChaveMes, object], limite: Optional[int]) -> List[ChaveMes]:
    periodos = sorted(acumulado)
    if limite is None:
        return periodos
    return periodos[max(len(periodos) - max(limite, 0), 0):]


def faturamento_por_mes(
    pedidos: Sequence[Pedido],
    limite: int = LIMITE_MESES
) -> List[FaturamentoMensal]:
    """
    Faturamento dos pedidos pagos por mês de pagamento.

    Returns:
        Lista em ordem cronológica com os últimos `limite` meses
    """
    acumulado: Dict[ChaveMes, Decimal] = defaultdict(Decimal)
    for p in pedidos:
        if p.status is not StatusPedido.PAGO or p.data_pagamento is None:
            continue
        chave = ChaveMes(p.data_pagamento.year, p.data_pagamento.month)
        acumulado[chave] += p.valor

    return [
        FaturamentoMensal(periodo=periodo, faturamento=acumulado[periodo])
        for periodo in _ultimos_periodos(acumulado, limite)
    ]


def pedidos_ao_longo_do_tempo(
    pedidos: Sequence[Pedido],
    limite: int = LIMITE_MESES
) -> List[ContagemMensal]:
    """Quantidade de pedidos por mês da data do pedido, qualquer que seja o status."""
    acumulado: Dict[ChaveMes, int] = defaultdict(int)
    for p in pedidos:
        if p.data_pedido is None:
            continue
        acumulado[ChaveMes(p.data_pedido.year, p.data_pedido.month)] += 1

    return [
        ContagemMensal(periodo=periodo, quantidade=acumulado[periodo])
        for periodo in _ultimos_periodos(acumulado, limite)
    ]


def distribuicao_status(pedidos: Sequence[Pedido]) -> List[FatiaDistribuicao]:
    """Pagos x pendentes sobre a coleção inteira."""
    pagos = sum(1 for p in pedidos if p.status is StatusPedido.PAGO)
    pendentes = len(pedidos) - pagos
    total = len(pedidos)

    return [
        FatiaDistribuicao(rotulo="Pagos", quantidade=pagos, percentual=calcular_percentual(pagos, total)),
        FatiaDistribuicao(rotulo="Pendentes", quantidade=pendentes, percentual=calcular_percentual(pendentes, total)),
    ]


def pedidos_por_categoria(
    pedidos: Sequence[Pedido],
    campo: CampoCategoria,
    limite: Optional[int] = None,
    ordenar: bool = True
) -> List[ContagemCategoria]:
    """
    Conta pedidos por categoria (boleira ou tipo).

    Args:
        pedidos: Pedidos normalizados
        campo: "boleira" ou "tipo"; ausente vira o rótulo "Sem boleira" / "Não especificado"
        limite: Quantidade máxima de categorias (None = todas)
        ordenar: Se True, ordena pela quantidade (decrescente); senão mantém a ordem de aparição

    Returns:
        Lista de ContagemCategoria com percentual sobre o total de pedidos
    """
    if campo not in _EXTRATORES:
        raise ValueError(f"Campo de categoria não suportado: {campo}")
    extrair = _EXTRATORES[campo]

    contagem: Dict[str, int] = {}
    for p in pedidos:
        categoria = extrair(p)
        contagem[categoria] = contagem.get(categoria, 0) + 1

    itens = list(contagem.items())
    if ordenar:
        itens = sorted(itens, key=lambda item: item[1], reverse=True)
    if limite is not None:
        itens = itens[:limite]

    total = len(pedidos)
    return [
        ContagemCategoria(categoria=categoria, quantidade=qtd, percentual=calcular_percentual(qtd, total))
        for categoria, qtd in itens
    ]


def pedidos_por_boleira(pedidos: Sequence[Pedido], limite: int = LIMITE_BOLEIRAS) -> List[ContagemCategoria]:
    return pedidos_por_categoria(pedidos, "boleira", limite=limite)


def pedidos_por_tipo(pedidos: Sequence[Pedido]) -> List[ContagemCategoria]:
    return pedidos_por_categoria(pedidos, "tipo", ordenar=False)


def faturamento_por_boleira(
    pedidos: Sequence[Pedido],
    limite: int = LIMITE_BOLEIRAS
) -> List[FaturamentoCategoria]:
    """Faturamento dos pedidos pagos por boleira, maiores primeiro."""
    acumulado: Dict[str, Decimal] = {}
    for p in pedidos:
        if p.status is not StatusPedido.PAGO:
            continue
        acumulado[p.categoria_boleira] = acumulado.get(p.categoria_boleira, Decimal("0")) + p.valor

    itens = sorted(acumulado.items(), key=lambda item: item[1], reverse=True)[:limite]
    return [FaturamentoCategoria(categoria=categoria, faturamento=valor) for categoria, valor in itens]


def comparacao_status_por_boleira(
    pedidos: Sequence[Pedido],
    limite: int = LIMITE_COMPARACAO
) -> List[ComparacaoStatus]:
    """Pagos x pendentes por boleira, ordenado pelo total de pedidos."""
    comparacao: Dict[str, ComparacaoStatus] = {}
    for p in pedidos:
        categoria = p.categoria_boleira
        atual = comparacao.get(categoria) or ComparacaoStatus(categoria=categoria)
        if p.status is StatusPedido.PAGO:
            atual = atual.model_copy(update={"pagos": atual.pagos + 1})
        else:
            atual = atual.model_copy(update={"pendentes": atual.pendentes + 1})
        comparacao[categoria] = atual

    itens = sorted(comparacao.values(), key=lambda c: c.total, reverse=True)
    return itens[:limite]
