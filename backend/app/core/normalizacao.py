"""
Normalização de pedidos brutos (planilha / banco) para o modelo Pedido
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from app.core.models import Pedido, StatusPedido

logger = logging.getLogger(__name__)

FORMATOS_DATA = [
    '%Y-%m-%d',
    '%d/%m/%Y',
    '%d/%m/%y',
    '%d-%m-%Y',
]


def _parse_data(valor: Any) -> Optional[date]:
    """
    Converte valor de data para date.
    Aceita date/datetime, YYYY-MM-DD, ISO com horário (ex: 2024-05-10T03:00:00.000Z),
    DD/MM/YYYY, DD/MM/YY e DD-MM-YYYY. Retorna None se não for possível converter.
    """
    if valor is None:
        return None

    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor

    if not isinstance(valor, str):
        return None

    data_str = valor.strip()
    if not data_str:
        return None

    # ISO com horário: o Apps Script serializa datas como "2024-05-10T03:00:00.000Z".
    # Só a parte de calendário interessa.
    if 'T' in data_str and len(data_str) >= 10:
        data_str = data_str[:10]

    for fmt in FORMATOS_DATA:
        try:
            return datetime.strptime(data_str, fmt).date()
        except ValueError:
            continue

    return None


def _parse_valor(valor: Any) -> Optional[Decimal]:
    """
    Converte valor monetário para Decimal.
    Aceita números e strings no formato brasileiro (1.234,56 / R$ 50,00)
    ou americano (1,234.56 / 50.5). Retorna None se não for possível converter.
    """
    if valor is None or isinstance(valor, bool):
        return None

    if isinstance(valor, Decimal):
        resultado = valor
    elif isinstance(valor, (int, float)):
        resultado = Decimal(str(valor))
    elif isinstance(valor, str):
        valor_str = valor.strip().replace('R$', '').replace(' ', '')
        if not valor_str:
            return None

        # Brasileiro: 1.234,56 (ponto milhares, vírgula decimal)
        # Americano: 1,234.56 (vírgula milhares, ponto decimal)
        if ',' in valor_str and '.' in valor_str:
            if valor_str.rindex(',') > valor_str.rindex('.'):
                valor_str = valor_str.replace('.', '').replace(',', '.')
            else:
                valor_str = valor_str.replace(',', '')
        elif ',' in valor_str:
            partes = valor_str.split(',')
            if len(partes) == 2 and len(partes[1]) <= 2:
                valor_str = valor_str.replace(',', '.')
            else:
                valor_str = valor_str.replace(',', '')

        try:
            resultado = Decimal(valor_str)
        except InvalidOperation:
            return None
    else:
        return None

    if not resultado.is_finite():
        return None
    return resultado


def _texto(valor: Any) -> Optional[str]:
    if valor is None:
        return None
    texto = str(valor).strip()
    return texto or None


def _parse_id(valor: Any) -> Tuple[Optional[Any], bool]:
    """
    Converte o id bruto para int ou str.
    Retorna (id, válido); listas, dicts e afins viram (None, False).
    """
    if valor is None:
        return None, True
    if isinstance(valor, bool):
        return None, False
    if isinstance(valor, int):
        return valor, True
    if isinstance(valor, float):
        if not valor.is_integer():
            return str(valor), True
        return int(valor), True
    if isinstance(valor, (str, Decimal)):
        return _texto(valor), True
    return None, False


def _normalizar(raw: Mapping[str, Any]) -> Tuple[Pedido, List[str]]:
    issues = []
    bruto_id = raw.get('id')
    identificador, id_valido = _parse_id(bruto_id)
    ref = f"Pedido {identificador}" if identificador is not None else "Pedido sem id"
    if not id_valido:
        issues.append(f"{ref}: id inválido ignorado: {bruto_id!r}")

    datas = {}
    for campo in ('data_pedido', 'data_entrega', 'data_pagamento'):
        bruto = raw.get(campo)
        data = _parse_data(bruto)
        if data is None and _texto(bruto) is not None:
            issues.append(f"{ref}: {campo} inválida: {bruto!r}")
        datas[campo] = data

    bruto_valor = raw.get('valor')
    valor = _parse_valor(bruto_valor)
    if valor is None:
        if _texto(bruto_valor) is not None:
            issues.append(f"{ref}: valor inválido: {bruto_valor!r}")
        valor = Decimal("0")
    elif valor < 0:
        issues.append(f"{ref}: valor negativo ignorado: {bruto_valor!r}")
        valor = Decimal("0")

    pedido = Pedido(
        id=identificador,
        boleira=_texto(raw.get('boleira')) or "",
        tema=_texto(raw.get('tema')),
        aniversariante=_texto(raw.get('aniversariante')),
        tipo=_texto(raw.get('tipo')),
        aro=_texto(raw.get('aro')),
        valor=valor,
        **datas,
    )

    # O status informado pela origem nunca é autoritativo
    status_informado = _texto(raw.get('status'))
    if status_informado is not None and status_informado != pedido.status.value:
        issues.append(
            f"{ref}: status informado '{status_informado}' difere do derivado "
            f"'{pedido.status.value}'"
        )

    return pedido, issues


def normalizar_pedido(raw: Mapping[str, Any]) -> Pedido:
    """
    Converte um pedido bruto em Pedido.

    Nunca lança exceção por dado inválido: datas inválidas viram None,
    valores inválidos viram 0.
    """
    pedido, issues = _normalizar(raw)
    for issue in issues:
        logger.warning(issue)
    return pedido


def normalizar_pedidos(registros: Iterable[Any]) -> Tuple[List[Pedido], List[str]]:
    """
    Normaliza uma coleção de pedidos brutos.

    Args:
        registros: Pedidos brutos (dicts) vindos da planilha ou do banco

    Returns:
        Tupla (lista de Pedido, lista de issues)
    """
    pedidos = []
    issues = []

    for posicao, raw in enumerate(registros, start=1):
        if not isinstance(raw, Mapping):
            issues.append(f"Registro {posicao}: ignorado, não é um objeto ({type(raw).__name__})")
            continue

        pedido, issues_pedido = _normalizar(raw)
        pedidos.append(pedido)
        issues.extend(issues_pedido)

    logger.info(f"Normalização concluída: {len(pedidos)} pedidos")
    if issues:
        logger.warning(f"Total de issues na normalização: {len(issues)}")
        for issue in issues:
            logger.debug(issue)

    return pedidos, issues


def extrair_registros(payload: Any) -> List[Any]:
    """
    Extrai a lista de pedidos brutos da resposta da origem.

    Aceita tanto o envelope {"success": true, "data": [...]} quanto a lista pura.
    """
    if isinstance(payload, list):
        return payload

    if isinstance(payload, Mapping):
        dados = payload.get('data')
        if isinstance(dados, list):
            return dados
        logger.warning(f"Resposta sem lista de pedidos em 'data': {type(dados).__name__}")
        return []

    logger.warning(f"Formato de resposta não reconhecido: {type(payload).__name__}")
    return []
