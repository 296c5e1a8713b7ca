"""
Testes para o motor de agregações (gráficos do painel)
"""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from app.core.models import Pedido
from app.services.analytics.agregacoes import (
    calcular_percentual,
    comparacao_status_por_boleira,
    distribuicao_status,
    faturamento_por_boleira,
    faturamento_por_mes,
    pedidos_ao_longo_do_tempo,
    pedidos_por_boleira,
    pedidos_por_categoria,
    pedidos_por_tipo,
)
from app.services.analytics.modelos import ChaveMes


def _pedido(boleira="Ana", valor="0", pagamento=None, data_pedido=None, tipo=None):
    return Pedido(
        boleira=boleira,
        valor=Decimal(valor),
        data_pagamento=pagamento,
        data_pedido=data_pedido,
        tipo=tipo,
    )


def test_faturamento_por_mes_ordem_cronologica_e_ultimos_12():
    """14 meses de pagamentos, fora de ordem: ficam os 12 mais recentes em ordem"""
    pedidos = []
    for i in reversed(range(14)):
        ano, mes = divmod(2023 * 12 + i, 12)
        pedidos.append(_pedido(valor="10", pagamento=date(ano, mes + 1, 1)))

    resultado = faturamento_por_mes(pedidos)

    assert len(resultado) == 12
    periodos = [r.periodo for r in resultado]
    assert periodos == sorted(periodos)
    assert periodos[0] == ChaveMes(2023, 3)
    assert periodos[-1] == ChaveMes(2024, 2)


def test_faturamento_por_mes_soma_decimal():
    """Muitas parcelas pequenas somam sem erro de ponto flutuante"""
    pedidos = [_pedido(valor="0.1", pagamento=date(2024, 5, d)) for d in range(1, 11)]

    resultado = faturamento_por_mes(pedidos)

    assert resultado[0].faturamento == Decimal("1.0")


def test_faturamento_por_mes_ignora_pendentes():
    pedidos = [
        _pedido(valor="50", pagamento=date(2024, 5, 10)),
        _pedido(valor="999"),
    ]

    resultado = faturamento_por_mes(pedidos)

    assert len(resultado) == 1
    assert resultado[0].faturamento == Decimal("50")


def test_pedidos_ao_longo_do_tempo():
    """Conta pela data do pedido, qualquer status; data inválida fica de fora"""
    pedidos = [
        _pedido(data_pedido=date(2024, 2, 1)),
        _pedido(data_pedido=date(2024, 1, 15), pagamento=date(2024, 1, 20)),
        _pedido(data_pedido=date(2024, 2, 20)),
        _pedido(data_pedido=None),
    ]

    resultado = pedidos_ao_longo_do_tempo(pedidos)

    assert [(r.periodo, r.quantidade) for r in resultado] == [
        (ChaveMes(2024, 1), 1),
        (ChaveMes(2024, 2), 2),
    ]


def test_pedidos_ao_longo_do_tempo_ultimos_12():
    """13 meses de pedidos fora de ordem: o mais antigo sai, o resto fica em ordem"""
    pedidos = []
    for i in [5, 0, 12, 3, 8, 1, 10, 7, 2, 11, 4, 9, 6]:
        ano, mes = divmod(2023 * 12 + i, 12)
        pedidos.append(_pedido(data_pedido=date(ano, mes + 1, 10)))

    resultado = pedidos_ao_longo_do_tempo(pedidos)

    assert len(resultado) == 12
    periodos = [r.periodo for r in resultado]
    assert periodos == sorted(periodos)
    assert ChaveMes(2023, 1) not in periodos
    assert periodos[0] == ChaveMes(2023, 2)
    assert periodos[-1] == ChaveMes(2024, 1)
    assert all(r.quantidade == 1 for r in resultado)


def test_distribuicao_status():
    pedidos = [_pedido(pagamento=date(2024, 1, 1)), _pedido(), _pedido(), _pedido()]

    pagos, pendentes = distribuicao_status(pedidos)

    assert (pagos.quantidade, pendentes.quantidade) == (1, 3)
    assert pagos.percentual == Decimal("25.00")
    assert pendentes.percentual == Decimal("75.00")


def test_distribuicao_status_vazia():
    """Coleção vazia: percentuais 0, sem divisão por zero"""
    pagos, pendentes = distribuicao_status([])

    assert pagos.quantidade == pendentes.quantidade == 0
    assert pagos.percentual == pendentes.percentual == Decimal("0")


def test_calcular_percentual():
    assert calcular_percentual(1, 3) == Decimal("33.33")
    assert calcular_percentual(5, 0) == Decimal("0")


def test_pedidos_por_boleira_top_10_e_sentinela():
    """Ordena por quantidade, limita a 10 e agrupa boleira vazia"""
    pedidos = [_pedido(boleira="")] * 20
    for i in range(12):
        pedidos += [_pedido(boleira=f"B{i:02d}")] * (i + 1)

    resultado = pedidos_por_boleira(pedidos)

    assert len(resultado) == 10
    assert resultado[0].categoria == "Sem boleira"
    assert resultado[0].quantidade == 20
    quantidades = [r.quantidade for r in resultado]
    assert quantidades == sorted(quantidades, reverse=True)


def test_pedidos_por_boleira_empate_mantem_ordem_de_aparicao():
    """Empates preservam a ordem em que a boleira apareceu na coleção"""
    pedidos = [
        _pedido(boleira="Carla"),
        _pedido(boleira="Ana"),
        _pedido(boleira="Bia"),
        _pedido(boleira="Bia"),
        _pedido(boleira="Ana"),
        _pedido(boleira="Carla"),
        _pedido(boleira="Duda"),
    ]

    resultado = pedidos_por_boleira(pedidos)

    assert [r.categoria for r in resultado] == ["Carla", "Ana", "Bia", "Duda"]


def test_pedidos_por_tipo_sem_truncar():
    """Tipo: sem limite, ordem de aparição, ausente vira 'Não especificado'"""
    tipos = ["Simples", None, "3D", "Adesivo", "Papel", "Simples", "Bolo de pote"] + [f"T{i}" for i in range(10)]
    pedidos = [_pedido(tipo=t) for t in tipos]

    resultado = pedidos_por_tipo(pedidos)

    assert len(resultado) == 16
    assert [r.categoria for r in resultado[:3]] == ["Simples", "Não especificado", "3D"]
    assert resultado[0].quantidade == 2


def test_pedidos_por_categoria_campo_invalido():
    with pytest.raises(ValueError):
        pedidos_por_categoria([], "tema")


def test_faturamento_por_boleira():
    """Exemplo do painel: Ana 50.5, Bia 20, pendentes não contam"""
    pedidos = [
        _pedido(boleira="Ana", valor="50.5", pagamento=date(2024, 5, 10)),
        _pedido(boleira="Ana", valor="0"),
        _pedido(boleira="Bia", valor="20", pagamento=date(2024, 5, 15)),
    ]

    resultado = faturamento_por_boleira(pedidos)

    assert [(r.categoria, r.faturamento) for r in resultado] == [
        ("Ana", Decimal("50.5")),
        ("Bia", Decimal("20")),
    ]


def test_faturamento_por_boleira_empate_e_limite():
    pedidos = [_pedido(boleira=f"B{i:02d}", valor="10", pagamento=date(2024, 1, 1)) for i in range(12)]

    resultado = faturamento_por_boleira(pedidos)

    assert len(resultado) == 10
    assert [r.categoria for r in resultado] == [f"B{i:02d}" for i in range(10)]


def test_comparacao_status_por_boleira():
    """Top 8 pelo total; empate mantém ordem de aparição"""
    pedidos = [
        _pedido(boleira="Ana", pagamento=date(2024, 1, 1)),
        _pedido(boleira="Bia"),
        _pedido(boleira="Bia", pagamento=date(2024, 1, 2)),
        _pedido(boleira="Ana"),
        _pedido(boleira="Carla"),
        _pedido(boleira="Carla"),
        _pedido(boleira="Carla"),
    ]
    for i in range(10):
        pedidos.append(_pedido(boleira=f"Extra{i}"))

    resultado = comparacao_status_por_boleira(pedidos)

    assert len(resultado) == 8
    assert [(r.categoria, r.pagos, r.pendentes) for r in resultado[:3]] == [
        ("Carla", 0, 3),
        ("Ana", 1, 1),
        ("Bia", 1, 1),
    ]
    assert [r.categoria for r in resultado[3:]] == [f"Extra{i}" for i in range(5)]


def test_colecao_vazia():
    """Toda agregação aceita coleção vazia"""
    assert faturamento_por_mes([]) == []
    assert pedidos_ao_longo_do_tempo([]) == []
    assert pedidos_por_boleira([]) == []
    assert pedidos_por_tipo([]) == []
    assert faturamento_por_boleira([]) == []
    assert comparacao_status_por_boleira([]) == []
