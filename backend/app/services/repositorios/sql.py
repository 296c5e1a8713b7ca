"""
Repositório de pedidos no banco local (SQLAlchemy)
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.models import StatusPedido
from app.core.normalizacao import normalizar_pedido
from app.models.pedido import PedidoDB
from app.services.repositorios.base import IdPedido, PedidoBruto

logger = logging.getLogger(__name__)


def _para_dict(pedido_db: PedidoDB) -> PedidoBruto:
    """Converte a linha do banco no mesmo formato que a planilha devolve"""
    return {
        "id": pedido_db.id,
        "boleira": pedido_db.boleira,
        "tema": pedido_db.tema,
        "aniversariante": pedido_db.aniversariante,
        "tipo": pedido_db.tipo,
        "aro": pedido_db.aro,
        "valor": str(pedido_db.valor) if pedido_db.valor is not None else None,
        "data_pedido": pedido_db.data_pedido.isoformat() if pedido_db.data_pedido else None,
        "data_entrega": pedido_db.data_entrega.isoformat() if pedido_db.data_entrega else None,
        "data_pagamento": pedido_db.data_pagamento.isoformat() if pedido_db.data_pagamento else None,
    }


def _colunas(dados: PedidoBruto) -> Dict[str, object]:
    """Converte dados brutos de entrada para os tipos das colunas"""
    pedido = normalizar_pedido(dados)
    return {
        "boleira": pedido.boleira,
        "tema": pedido.tema,
        "aniversariante": pedido.aniversariante,
        "tipo": pedido.tipo,
        "aro": pedido.aro,
        "valor": pedido.valor,
        "data_pedido": pedido.data_pedido,
        "data_entrega": pedido.data_entrega,
        "data_pagamento": pedido.data_pagamento,
    }


def _id_inteiro(pedido_id: IdPedido) -> Optional[int]:
    try:
        return int(pedido_id)
    except (TypeError, ValueError):
        return None


class RepositorioPedidosSQL:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _buscar(self, pedido_id: IdPedido) -> Optional[PedidoDB]:
        id_int = _id_inteiro(pedido_id)
        if id_int is None:
            return None
        return self.db.query(PedidoDB).filter(PedidoDB.id == id_int).first()

    def listar(self, filtros: Optional[Dict[str, str]] = None) -> List[PedidoBruto]:
        filtros = filtros or {}
        query = self.db.query(PedidoDB)

        boleira = filtros.get("boleira")
        if boleira:
            query = query.filter(PedidoDB.boleira == boleira)

        # Status é derivado da data de pagamento
        status = filtros.get("status")
        if status == StatusPedido.PAGO.value:
            query = query.filter(PedidoDB.data_pagamento.isnot(None))
        elif status == StatusPedido.PENDENTE.value:
            query = query.filter(PedidoDB.data_pagamento.is_(None))

        return [_para_dict(p) for p in query.order_by(PedidoDB.id).all()]

    def obter(self, pedido_id: IdPedido) -> Optional[PedidoBruto]:
        pedido_db = self._buscar(pedido_id)
        return _para_dict(pedido_db) if pedido_db else None

    def criar(self, dados: PedidoBruto) -> PedidoBruto:
        pedido_db = PedidoDB(**_colunas(dados))
        self.db.add(pedido_db)
        self.db.flush()
        self.db.refresh(pedido_db)
        logger.info(f"Pedido {pedido_db.id} criado")
        return _para_dict(pedido_db)

    def atualizar(self, pedido_id: IdPedido, dados: PedidoBruto) -> Optional[PedidoBruto]:
        pedido_db = self._buscar(pedido_id)
        if not pedido_db:
            return None

        for coluna, valor in _colunas(dados).items():
            setattr(pedido_db, coluna, valor)
        self.db.flush()
        self.db.refresh(pedido_db)
        logger.info(f"Pedido {pedido_db.id} atualizado")
        return _para_dict(pedido_db)

    def deletar(self, pedido_id: IdPedido) -> bool:
        pedido_db = self._buscar(pedido_id)
        if not pedido_db:
            return False

        self.db.delete(pedido_db)
        self.db.flush()
        logger.info(f"Pedido {pedido_id} removido")
        return True
