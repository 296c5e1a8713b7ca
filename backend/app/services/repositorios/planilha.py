"""
Cliente HTTP da planilha de pedidos (Google Apps Script)

O Apps Script expõe um único endpoint; a rota vai no parâmetro "path"
(ex: ?path=pedidos/12). Ele responde HTTP 200 em todos os casos, então o
erro vem no corpo: {"success": false, "error": "..."}.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from app.core.normalizacao import extrair_registros
from app.services.repositorios.base import (
    CAMPOS_PEDIDO,
    ErroApiPedidos,
    IdPedido,
    PedidoBruto,
)

logger = logging.getLogger(__name__)

MARCADORES_NAO_ENCONTRADO = ("não encontrado", "nao encontrado", "not found")


def _indica_nao_encontrado(erro: ErroApiPedidos) -> bool:
    mensagem = str(erro).lower()
    return any(marcador in mensagem for marcador in MARCADORES_NAO_ENCONTRADO)


class ClientePlanilhaPedidos:
    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None
    ) -> None:
        if not base_url:
            raise ValueError("URL do Apps Script não configurada (PLANILHA_URL)")
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Dict[str, str]] = None,
        body: Optional[PedidoBruto] = None
    ) -> Dict[str, Any]:
        query = {"path": endpoint.lstrip("/")}
        if params:
            query.update(params)

        logger.debug(f"{method} {self.base_url} {query}")
        try:
            resp = self.session.request(
                method,
                self.base_url,
                params=query,
                json=body,
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error(f"Erro de rede ao acessar a planilha ({method} {endpoint}): {exc}")
            raise ErroApiPedidos(f"Erro de rede ao acessar a planilha: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ErroApiPedidos("Resposta da planilha não é JSON. Verifique a URL do Apps Script.") from exc

        if isinstance(payload, dict) and (payload.get("error") or payload.get("success") is False):
            mensagem = payload.get("error") or "Erro na requisição do Google Planilhas"
            logger.error(f"Planilha retornou erro ({method} {endpoint}): {mensagem}")
            raise ErroApiPedidos(mensagem)

        if isinstance(payload, list):
            return {"success": True, "data": payload}
        return payload

    def listar(self, filtros: Optional[Dict[str, str]] = None) -> List[PedidoBruto]:
        params = {}
        for chave, valor in (filtros or {}).items():
            if not valor:
                continue
            if chave == "status" and valor == "Todos":
                continue
            params[chave] = valor

        payload = self._request("GET", "/pedidos", params=params)
        registros = extrair_registros(payload)
        logger.info(f"Planilha: {len(registros)} pedidos recebidos")
        return registros

    def obter(self, pedido_id: IdPedido) -> Optional[PedidoBruto]:
        try:
            payload = self._request("GET", f"/pedidos/{pedido_id}")
        except ErroApiPedidos as exc:
            if _indica_nao_encontrado(exc):
                return None
            raise
        dados = payload.get("data")
        return dados if isinstance(dados, dict) else None

    def criar(self, dados: PedidoBruto) -> PedidoBruto:
        corpo = {campo: dados.get(campo) for campo in CAMPOS_PEDIDO}
        payload = self._request("POST", "/pedidos", body=corpo)
        criado = payload.get("data")
        return criado if isinstance(criado, dict) else corpo

    def atualizar(self, pedido_id: IdPedido, dados: PedidoBruto) -> Optional[PedidoBruto]:
        corpo = {campo: dados.get(campo) for campo in CAMPOS_PEDIDO}
        try:
            payload = self._request("PUT", f"/pedidos/{pedido_id}", body=corpo)
        except ErroApiPedidos as exc:
            if _indica_nao_encontrado(exc):
                return None
            raise
        atualizado = payload.get("data")
        if isinstance(atualizado, dict):
            return atualizado
        return {"id": pedido_id, **corpo}

    def deletar(self, pedido_id: IdPedido) -> bool:
        try:
            self._request("DELETE", f"/pedidos/{pedido_id}")
        except ErroApiPedidos as exc:
            if _indica_nao_encontrado(exc):
                return False
            raise
        return True
