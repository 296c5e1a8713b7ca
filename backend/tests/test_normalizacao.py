"""
Testes para a normalização de pedidos brutos
"""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from pydantic import ValidationError

from app.core.models import Pedido, StatusPedido, SEM_BOLEIRA, SEM_TEMA, SEM_TIPO
from app.core.normalizacao import (
    extrair_registros,
    normalizar_pedido,
    normalizar_pedidos,
)


def test_pedido_completo():
    """Pedido com todos os campos válidos"""
    pedido = normalizar_pedido({
        "id": 7,
        "boleira": " Ana ",
        "data_pedido": "2024-03-05",
        "tema": "Frozen",
        "aro": "20",
        "tipo": "3D",
        "valor": "150,00",
        "data_entrega": "20/03/2024",
        "data_pagamento": "2024-03-06T03:00:00.000Z",
        "aniversariante": "Alice",
    })

    assert pedido.id == 7
    assert pedido.boleira == "Ana"
    assert pedido.valor == Decimal("150.00")
    assert pedido.data_pedido == date(2024, 3, 5)
    assert pedido.data_entrega == date(2024, 3, 20)
    assert pedido.data_pagamento == date(2024, 3, 6)
    assert pedido.status is StatusPedido.PAGO


@pytest.mark.parametrize("data_pagamento", [None, "", "   ", "not-a-date", "31/02/2024", 12345])
def test_status_pendente_sem_pagamento_valido(data_pagamento):
    """Status é Pago somente com data de pagamento válida"""
    pedido = normalizar_pedido({"boleira": "Ana", "data_pagamento": data_pagamento})

    assert pedido.data_pagamento is None
    assert pedido.status is StatusPedido.PENDENTE


def test_status_informado_nao_prevalece():
    """Status vindo da origem é ignorado em favor do derivado"""
    pedido, issues = normalizar_pedidos([{"id": 1, "status": "Pago", "data_pagamento": None}])

    assert pedido[0].status is StatusPedido.PENDENTE
    assert any("status informado" in issue for issue in issues)


def test_status_nao_pode_ser_atribuido():
    """Pedido é imutável e o status não é um campo de entrada"""
    pedido = Pedido(boleira="Ana", status="Pago")
    assert pedido.status is StatusPedido.PENDENTE

    with pytest.raises(ValidationError):
        pedido.boleira = "Bia"


def test_atualizacao_gera_novo_pedido():
    """model_copy produz outro objeto e recalcula o status"""
    original = normalizar_pedido({"boleira": "Ana"})
    pago = original.model_copy(update={"data_pagamento": date(2024, 5, 1)})

    assert original.status is StatusPedido.PENDENTE
    assert pago.status is StatusPedido.PAGO
    assert pago is not original


@pytest.mark.parametrize("bruto, esperado", [
    ("50.5", Decimal("50.5")),
    ("1.234,56", Decimal("1234.56")),
    ("1,234.56", Decimal("1234.56")),
    ("R$ 80,00", Decimal("80.00")),
    (20, Decimal("20")),
    (12.5, Decimal("12.5")),
    (None, Decimal("0")),
    ("", Decimal("0")),
    ("abc", Decimal("0")),
    ("NaN", Decimal("0")),
    ("-10", Decimal("0")),
    (True, Decimal("0")),
])
def test_valor(bruto, esperado):
    """Valores inválidos viram 0 sem lançar exceção"""
    assert normalizar_pedido({"valor": bruto}).valor == esperado


def test_campos_de_texto_vazios():
    """Campos opcionais vazios viram None; boleira vazia vira string vazia"""
    pedido = normalizar_pedido({"boleira": "  ", "tema": "", "tipo": None})

    assert pedido.boleira == ""
    assert pedido.tema is None
    assert pedido.categoria_boleira == SEM_BOLEIRA
    assert pedido.categoria_tipo == SEM_TIPO
    assert pedido.tema_exibicao == SEM_TEMA


def test_lote_com_registro_malformado():
    """Um registro ruim não interrompe a normalização dos demais"""
    pedidos, issues = normalizar_pedidos([
        {"id": 1, "boleira": "Ana", "data_pedido": "not-a-date", "valor": "xyz"},
        "lixo",
        {"id": 2, "boleira": "Bia", "data_pedido": "2024-01-10"},
    ])

    assert [p.id for p in pedidos] == [1, 2]
    assert pedidos[0].data_pedido is None
    assert pedidos[0].valor == Decimal("0")
    assert len(issues) == 3
    assert any("Registro 2" in issue for issue in issues)


@pytest.mark.parametrize("bruto, esperado, com_issue", [
    (1.5, "1.5", False),
    (3.0, 3, False),
    ("  12 ", "12", False),
    (Decimal("4"), "4", False),
    ([1], None, True),
    ({"a": 1}, None, True),
    (True, None, True),
])
def test_lote_com_id_irregular(bruto, esperado, com_issue):
    """Id de tipo inesperado não derruba o lote"""
    pedidos, issues = normalizar_pedidos([
        {"id": bruto, "boleira": "Ana"},
        {"id": 2, "boleira": "Bia"},
    ])

    assert [p.boleira for p in pedidos] == ["Ana", "Bia"]
    assert pedidos[0].id == esperado
    assert pedidos[1].id == 2
    assert any("id inválido" in issue for issue in issues) is com_issue


def test_lote_vazio():
    assert normalizar_pedidos([]) == ([], [])


def test_extrair_registros_envelope_e_lista():
    """Aceita envelope {success, data} ou lista pura"""
    registros = [{"id": 1}]

    assert extrair_registros({"success": True, "data": registros}) == registros
    assert extrair_registros(registros) == registros
    assert extrair_registros({"success": True, "message": "ok"}) == []
    assert extrair_registros("texto") == []
