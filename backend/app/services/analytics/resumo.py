"""
Resumo dos pedidos para os cards do painel
"""

from decimal import Decimal
from typing import Sequence

from app.core.models import Pedido, StatusPedido
from app.services.analytics.modelos import ResumoPedidos


def resumir(pedidos: Sequence[Pedido]) -> ResumoPedidos:
    """Total de pedidos, pagos, pendentes e faturamento (somente pagos)."""
    pagos = 0
    faturamento = Decimal("0")
    for p in pedidos:
        if p.status is StatusPedido.PAGO:
            pagos += 1
            faturamento += p.valor

    return ResumoPedidos(
        total=len(pedidos),
        pagos=pagos,
        pendentes=len(pedidos) - pagos,
        faturamento_total=faturamento,
    )
