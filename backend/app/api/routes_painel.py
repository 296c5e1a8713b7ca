"""
Rotas FastAPI do painel: gráficos, calendário e resumo
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.dependencias import get_repositorio
from app.api.routes_pedidos import resumo_para_schema
from app.api.schemas_pedidos import (
    CalendarioSchema,
    ComparacaoStatusSchema,
    ContagemCategoriaSchema,
    ContagemMensalSchema,
    DiaCalendarioSchema,
    FatiaStatusSchema,
    FaturamentoCategoriaSchema,
    FaturamentoMensalSchema,
    GraficosSchema,
    MesSchema,
    PedidoSchema,
    ResumoSchema,
    rotulo_mes,
)
from app.services.analytics.calendario import NOMES_DIAS, NOMES_MESES, montar_visao_mensal, navegar_mes
from app.services.painel.service import carregar_pedidos, montar_graficos
from app.services.repositorios.base import ErroApiPedidos, RepositorioPedidos

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/painel", tags=["painel"])


def _carregar(repositorio: RepositorioPedidos):
    try:
        pedidos, _ = carregar_pedidos(repositorio)
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))
    return pedidos


@router.get("/graficos", response_model=GraficosSchema)
def obter_graficos(repositorio: RepositorioPedidos = Depends(get_repositorio)):
    """Séries de todos os gráficos, recalculadas a partir da coleção completa."""
    graficos = montar_graficos(_carregar(repositorio))

    return GraficosSchema(
        faturamento_mensal=[
            FaturamentoMensalSchema(
                ano=item.periodo.ano,
                mes=item.periodo.mes,
                rotulo=rotulo_mes(item.periodo),
                faturamento=float(item.faturamento),
            )
            for item in graficos.faturamento_mensal
        ],
        status=[
            FatiaStatusSchema(rotulo=f.rotulo, quantidade=f.quantidade, percentual=float(f.percentual))
            for f in graficos.status
        ],
        pedidos_por_boleira=[
            ContagemCategoriaSchema(categoria=c.categoria, quantidade=c.quantidade, percentual=float(c.percentual))
            for c in graficos.pedidos_por_boleira
        ],
        faturamento_por_boleira=[
            FaturamentoCategoriaSchema(categoria=c.categoria, faturamento=float(c.faturamento))
            for c in graficos.faturamento_por_boleira
        ],
        pedidos_por_tipo=[
            ContagemCategoriaSchema(categoria=c.categoria, quantidade=c.quantidade, percentual=float(c.percentual))
            for c in graficos.pedidos_por_tipo
        ],
        comparacao_por_boleira=[
            ComparacaoStatusSchema(categoria=c.categoria, pagos=c.pagos, pendentes=c.pendentes)
            for c in graficos.comparacao_por_boleira
        ],
        pedidos_por_mes=[
            ContagemMensalSchema(
                ano=item.periodo.ano,
                mes=item.periodo.mes,
                rotulo=rotulo_mes(item.periodo),
                quantidade=item.quantidade,
            )
            for item in graficos.pedidos_por_mes
        ],
    )


@router.get("/calendario", response_model=CalendarioSchema)
def obter_calendario(
    ano: Optional[int] = Query(None, ge=1, le=9999),
    mes: Optional[int] = Query(None, ge=1, le=12),
    repositorio: RepositorioPedidos = Depends(get_repositorio),
):
    """
    Calendário de pedidos e entregas de um mês.
    Sem ano/mês, abre no mês atual.
    """
    hoje = date.today()
    ano = ano or hoje.year
    mes = mes or hoje.month

    visao = montar_visao_mensal(_carregar(repositorio), ano, mes)
    ano_anterior, mes_anterior = navegar_mes(ano, mes, -1)
    ano_proximo, mes_proximo = navegar_mes(ano, mes, 1)

    return CalendarioSchema(
        ano=visao.ano,
        mes=visao.mes,
        nome_mes=NOMES_MESES[visao.mes - 1],
        total_dias=visao.total_dias,
        primeiro_dia_semana=visao.primeiro_dia_semana,
        dias_semana=NOMES_DIAS,
        celulas=visao.celulas(),
        dias=[
            DiaCalendarioSchema(
                dia=dia.dia,
                pedidos=[PedidoSchema.de_pedido(p) for p in dia.pedidos],
                entregas=[PedidoSchema.de_pedido(p) for p in dia.entregas],
            )
            for dia in visao.dias.values()
        ],
        anterior=MesSchema(ano=ano_anterior, mes=mes_anterior),
        proximo=MesSchema(ano=ano_proximo, mes=mes_proximo),
    )


@router.get("/resumo", response_model=ResumoSchema)
def obter_resumo(repositorio: RepositorioPedidos = Depends(get_repositorio)):
    """Contadores dos cards do painel."""
    return resumo_para_schema(_carregar(repositorio))
