"""
Modelo SQLAlchemy para pedidos
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric

from app.models.base import Base


class PedidoDB(Base):
    """Pedido armazenado no banco local (espelho das colunas da planilha)"""
    
    __tablename__ = "pedidos"
    
    id = Column(Integer, primary_key=True, index=True)
    criado_em = Column(DateTime, default=datetime.utcnow, nullable=False)
    atualizado_em = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    boleira = Column(String(120), nullable=False, default="", index=True)
    tema = Column(String(255), nullable=True)
    aniversariante = Column(String(255), nullable=True)
    tipo = Column(String(50), nullable=True)  # 3D, Simples, Adesivo, Papel
    aro = Column(String(50), nullable=True)
    valor = Column(Numeric(12, 2), nullable=True)
    
    data_pedido = Column(Date, nullable=True)
    data_entrega = Column(Date, nullable=True)
    data_pagamento = Column(Date, nullable=True)  # Sem data = pendente
