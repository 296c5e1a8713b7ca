"""
Modelos Pydantic para dados em memória
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, computed_field


# Rótulos usados quando o campo categórico não foi informado
SEM_BOLEIRA = "Sem boleira"
SEM_TIPO = "Não especificado"
SEM_TEMA = "Sem tema"


class StatusPedido(str, Enum):
    """Situação do pagamento de um pedido"""
    PAGO = "Pago"
    PENDENTE = "Pendente"


class Pedido(BaseModel):
    """
    Pedido normalizado.

    Imutável após a normalização; uma atualização gera um novo objeto
    (``pedido.model_copy(update=...)``). O status não é armazenado: é sempre
    derivado da data de pagamento.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = None
    boleira: str = ""
    tema: Optional[str] = None
    aniversariante: Optional[str] = None
    tipo: Optional[str] = None
    aro: Optional[str] = None
    valor: Decimal = Decimal("0")
    data_pedido: Optional[date] = None  # None = ausente ou inválida
    data_entrega: Optional[date] = None  # None = ainda não definida
    data_pagamento: Optional[date] = None  # None = não pago

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> StatusPedido:
        if self.data_pagamento is not None:
            return StatusPedido.PAGO
        return StatusPedido.PENDENTE

    @property
    def categoria_boleira(self) -> str:
        return self.boleira or SEM_BOLEIRA

    @property
    def categoria_tipo(self) -> str:
        return self.tipo or SEM_TIPO

    @property
    def tema_exibicao(self) -> str:
        return self.tema or SEM_TEMA
