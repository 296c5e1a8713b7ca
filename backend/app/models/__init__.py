"""
Modelos SQLAlchemy
"""

from app.models.base import Base
from app.models.pedido import PedidoDB

__all__ = [
    "Base",
    "PedidoDB",
]
