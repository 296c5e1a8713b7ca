#!/usr/bin/env python3
"""
Script para popular o banco local com pedidos de teste.
Uso: python popular_pedidos_teste.py (a partir da raiz do repositório)
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "backend"))

from app.db import init_db, SessionLocal
from app.services.repositorios.sql import RepositorioPedidosSQL


PEDIDOS_TESTE = [
    {"boleira": "Ana", "data_pedido": "2025-03-01", "tema": "Frozen", "aro": "20", "tipo": "3D",
     "valor": "180,00", "data_entrega": "2025-03-15", "data_pagamento": "2025-03-02", "aniversariante": "Alice"},
    {"boleira": "Ana", "data_pedido": "2025-03-05", "tema": "Safari", "aro": "15", "tipo": "Simples",
     "valor": "95,50", "data_entrega": "2025-03-20", "data_pagamento": None, "aniversariante": "Bento"},
    {"boleira": "Bia", "data_pedido": "2025-03-10", "tema": "Futebol", "aro": "25", "tipo": "Adesivo",
     "valor": "120", "data_entrega": "2025-04-02", "data_pagamento": "2025-03-28", "aniversariante": "Caio"},
    {"boleira": "Bia", "data_pedido": "2025-04-01", "tema": "Unicórnio", "aro": "20", "tipo": "Papel",
     "valor": "150.00", "data_entrega": "2025-04-12", "data_pagamento": "2025-04-01", "aniversariante": "Duda"},
    {"boleira": "Carla", "data_pedido": "2025-04-08", "tema": None, "aro": "15", "tipo": None,
     "valor": None, "data_entrega": None, "data_pagamento": None, "aniversariante": None},
]


def popular_pedidos_teste():
    """Insere pedidos de exemplo no banco configurado em DATABASE_URL"""
    init_db()
    db = SessionLocal()
    try:
        repositorio = RepositorioPedidosSQL(db)
        for dados in PEDIDOS_TESTE:
            repositorio.criar(dados)
        db.commit()
        print(f"{len(PEDIDOS_TESTE)} pedidos de teste inseridos")
    finally:
        db.close()


if __name__ == "__main__":
    popular_pedidos_teste()
