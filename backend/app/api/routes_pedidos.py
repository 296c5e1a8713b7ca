"""
Rotas FastAPI para pedidos
"""

import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.dependencias import get_repositorio
from app.api.schemas_pedidos import PedidoEntrada, PedidoSchema, ResumoSchema
from app.core.normalizacao import normalizar_pedido
from app.services.analytics.resumo import resumir
from app.services.painel.service import carregar_pedidos, filtrar_por_status
from app.services.repositorios.base import ErroApiPedidos, RepositorioPedidos

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pedidos", tags=["pedidos"])


def resumo_para_schema(pedidos) -> ResumoSchema:
    resumo = resumir(pedidos)
    return ResumoSchema(
        total_pedidos=resumo.total,
        pedidos_pagos=resumo.pagos,
        pedidos_pendentes=resumo.pendentes,
        faturamento_total=float(resumo.faturamento_total),
    )


@router.get("", response_model=List[PedidoSchema])
def listar_pedidos(
    status: Literal["Todos", "Pago", "Pendente"] = "Todos",
    boleira: Optional[str] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    repositorio: RepositorioPedidos = Depends(get_repositorio),
):
    """Lista pedidos normalizados, com filtro pelo status derivado e por boleira."""
    filtros = {"status": status}
    if boleira:
        filtros["boleira"] = boleira

    try:
        pedidos, _ = carregar_pedidos(repositorio, filtros)
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))

    # A origem pode ignorar o filtro; o status vale sempre o derivado
    pedidos = filtrar_por_status(pedidos, status)
    if boleira:
        pedidos = [p for p in pedidos if p.boleira == boleira]

    return [PedidoSchema.de_pedido(p) for p in pedidos[skip:skip + limit]]


@router.get("/stats", response_model=ResumoSchema)
def obter_estatisticas(repositorio: RepositorioPedidos = Depends(get_repositorio)):
    """Contadores dos cards: total, pagos, pendentes e faturamento."""
    try:
        pedidos, _ = carregar_pedidos(repositorio)
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))

    return resumo_para_schema(pedidos)


@router.get("/{pedido_id}", response_model=PedidoSchema)
def obter_pedido(pedido_id: str, repositorio: RepositorioPedidos = Depends(get_repositorio)):
    """Obtém um pedido pelo id."""
    try:
        raw = repositorio.obter(pedido_id)
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))

    if raw is None:
        raise HTTPException(status_code=404, detail="Pedido não encontrado")

    return PedidoSchema.de_pedido(normalizar_pedido(raw))


@router.post("", response_model=PedidoSchema, status_code=201)
def criar_pedido(dados: PedidoEntrada, repositorio: RepositorioPedidos = Depends(get_repositorio)):
    """Cria um pedido na origem configurada."""
    try:
        raw = repositorio.criar(dados.model_dump())
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))

    logger.info(f"Pedido criado: {raw.get('id')}")
    return PedidoSchema.de_pedido(normalizar_pedido(raw))


@router.put("/{pedido_id}", response_model=PedidoSchema)
def atualizar_pedido(
    pedido_id: str,
    dados: PedidoEntrada,
    repositorio: RepositorioPedidos = Depends(get_repositorio),
):
    """Atualiza um pedido existente."""
    try:
        raw = repositorio.atualizar(pedido_id, dados.model_dump())
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))

    if raw is None:
        raise HTTPException(status_code=404, detail="Pedido não encontrado")

    return PedidoSchema.de_pedido(normalizar_pedido(raw))


@router.delete("/{pedido_id}", status_code=204)
def deletar_pedido(pedido_id: str, repositorio: RepositorioPedidos = Depends(get_repositorio)):
    """Remove um pedido."""
    try:
        removido = repositorio.deletar(pedido_id)
    except ErroApiPedidos as e:
        raise HTTPException(status_code=502, detail=str(e))

    if not removido:
        raise HTTPException(status_code=404, detail="Pedido não encontrado")

    return None
