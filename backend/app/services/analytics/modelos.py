"""
Modelos dos resultados das agregações, do calendário e do resumo
"""

from decimal import Decimal
from typing import Dict, List, NamedTuple, Optional
from pydantic import BaseModel, Field

from app.core.models import Pedido


class ChaveMes(NamedTuple):
    """Período (ano, mês); a ordenação natural da tupla é cronológica"""
    ano: int
    mes: int


class FaturamentoMensal(BaseModel):
    periodo: ChaveMes
    faturamento: Decimal


class ContagemMensal(BaseModel):
    periodo: ChaveMes
    quantidade: int


class ContagemCategoria(BaseModel):
    categoria: str
    quantidade: int
    percentual: Decimal = Decimal("0")


class FaturamentoCategoria(BaseModel):
    categoria: str
    faturamento: Decimal


class FatiaDistribuicao(BaseModel):
    rotulo: str
    quantidade: int
    percentual: Decimal


class ComparacaoStatus(BaseModel):
    categoria: str
    pagos: int = 0
    pendentes: int = 0

    @property
    def total(self) -> int:
        return self.pagos + self.pendentes


class ResumoPedidos(BaseModel):
    """Contadores exibidos nos cards do painel"""
    total: int = 0
    pagos: int = 0
    pendentes: int = 0
    faturamento_total: Decimal = Decimal("0")


class DiaCalendario(BaseModel):
    dia: int
    pedidos: List[Pedido] = Field(default_factory=list)
    entregas: List[Pedido] = Field(default_factory=list)


class VisaoMensal(BaseModel):
    """Pedidos e entregas de um mês, dia a dia"""
    ano: int
    mes: int
    total_dias: int
    primeiro_dia_semana: int  # 0 = domingo ... 6 = sábado
    dias: Dict[int, DiaCalendario]

    def celulas(self) -> List[Optional[int]]:
        """Grade do calendário: células vazias antes do dia 1, depois 1..N"""
        return [None] * self.primeiro_dia_semana + list(range(1, self.total_dias + 1))


class PainelGraficos(BaseModel):
    """Todas as séries da aba de gráficos, calculadas sobre o mesmo conjunto de pedidos"""
    faturamento_mensal: List[FaturamentoMensal]
    status: List[FatiaDistribuicao]
    pedidos_por_boleira: List[ContagemCategoria]
    faturamento_por_boleira: List[FaturamentoCategoria]
    pedidos_por_tipo: List[ContagemCategoria]
    comparacao_por_boleira: List[ComparacaoStatus]
    pedidos_por_mes: List[ContagemMensal]
