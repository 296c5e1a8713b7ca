"""
Schemas Pydantic para API de pedidos e do painel
"""

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel

from app.core.models import Pedido
from app.services.analytics.modelos import ChaveMes

ABREVIACOES_MESES = [
    'jan.', 'fev.', 'mar.', 'abr.', 'mai.', 'jun.',
    'jul.', 'ago.', 'set.', 'out.', 'nov.', 'dez.'
]


def rotulo_mes(periodo: ChaveMes) -> str:
    """Rótulo curto do mês no padrão pt-BR (ex: "mai. de 2024")"""
    return f"{ABREVIACOES_MESES[periodo.mes - 1]} de {periodo.ano}"


class PedidoSchema(BaseModel):
    """Schema de pedido para resposta da API"""

    id: Optional[Union[int, str]] = None
    boleira: str
    tema: Optional[str] = None
    tema_exibicao: str  # "Sem tema" quando ausente
    aniversariante: Optional[str] = None
    tipo: Optional[str] = None
    aro: Optional[str] = None
    valor: float
    data_pedido: Optional[date] = None
    data_entrega: Optional[date] = None
    data_pagamento: Optional[date] = None
    status: str  # "Pago" | "Pendente", sempre derivado da data de pagamento

    @classmethod
    def de_pedido(cls, pedido: Pedido) -> "PedidoSchema":
        dados = pedido.model_dump(mode="json")
        dados["tema_exibicao"] = pedido.tema_exibicao
        return cls.model_validate(dados)


class PedidoEntrada(BaseModel):
    """Schema para criação/edição de pedido (campos da planilha, sem status)"""

    boleira: Optional[str] = None
    data_pedido: Optional[str] = None
    tema: Optional[str] = None
    aro: Optional[str] = None
    tipo: Optional[str] = None
    valor: Optional[Union[float, str]] = None
    data_entrega: Optional[str] = None
    data_pagamento: Optional[str] = None
    aniversariante: Optional[str] = None


class ResumoSchema(BaseModel):
    """Contadores dos cards (mesmos nomes do endpoint /pedidos/stats da planilha)"""

    total_pedidos: int
    pedidos_pagos: int
    pedidos_pendentes: int
    faturamento_total: float


class FaturamentoMensalSchema(BaseModel):
    ano: int
    mes: int
    rotulo: str
    faturamento: float


class ContagemMensalSchema(BaseModel):
    ano: int
    mes: int
    rotulo: str
    quantidade: int


class ContagemCategoriaSchema(BaseModel):
    categoria: str
    quantidade: int
    percentual: float


class FaturamentoCategoriaSchema(BaseModel):
    categoria: str
    faturamento: float


class FatiaStatusSchema(BaseModel):
    rotulo: str
    quantidade: int
    percentual: float


class ComparacaoStatusSchema(BaseModel):
    categoria: str
    pagos: int
    pendentes: int


class GraficosSchema(BaseModel):
    """Séries da aba de gráficos"""

    faturamento_mensal: List[FaturamentoMensalSchema]
    status: List[FatiaStatusSchema]
    pedidos_por_boleira: List[ContagemCategoriaSchema]
    faturamento_por_boleira: List[FaturamentoCategoriaSchema]
    pedidos_por_tipo: List[ContagemCategoriaSchema]
    comparacao_por_boleira: List[ComparacaoStatusSchema]
    pedidos_por_mes: List[ContagemMensalSchema]


class MesSchema(BaseModel):
    ano: int
    mes: int


class DiaCalendarioSchema(BaseModel):
    dia: int
    pedidos: List[PedidoSchema]
    entregas: List[PedidoSchema]


class CalendarioSchema(BaseModel):
    """Visão mensal do calendário de pedidos e entregas"""

    ano: int
    mes: int
    nome_mes: str
    total_dias: int
    primeiro_dia_semana: int  # 0 = domingo
    dias_semana: List[str]
    celulas: List[Optional[int]]
    dias: List[DiaCalendarioSchema]
    anterior: MesSchema
    proximo: MesSchema
