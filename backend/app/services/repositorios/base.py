"""
Contrato das origens de pedidos (planilha ou banco local)
"""

from typing import Any, Dict, List, Optional, Protocol, Union

PedidoBruto = Dict[str, Any]
IdPedido = Union[int, str]

# Colunas trocadas com a origem
CAMPOS_PEDIDO = (
    "boleira",
    "data_pedido",
    "tema",
    "aro",
    "tipo",
    "valor",
    "data_entrega",
    "data_pagamento",
    "aniversariante",
)


class ErroApiPedidos(RuntimeError):
    """Falha ao acessar a origem dos pedidos"""
    pass


class RepositorioPedidos(Protocol):
    """
    Origem dos pedidos. Devolve pedidos brutos (dicts); a normalização
    acontece depois, em app.core.normalizacao.
    """

    def listar(self, filtros: Optional[Dict[str, str]] = None) -> List[PedidoBruto]:
        ...

    def obter(self, pedido_id: IdPedido) -> Optional[PedidoBruto]:
        ...

    def criar(self, dados: PedidoBruto) -> PedidoBruto:
        ...

    def atualizar(self, pedido_id: IdPedido, dados: PedidoBruto) -> Optional[PedidoBruto]:
        ...

    def deletar(self, pedido_id: IdPedido) -> bool:
        ...
