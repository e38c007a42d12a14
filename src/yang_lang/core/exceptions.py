"""
yang-lang — Canonical Exceptions (v1)

Este módulo define a exceção base tipada de todo o yang-lang.

Objetivo:
- Permitir que cada camada (keys, codec, futures, config) levante exceções
  semânticas tipadas a partir de uma raiz comum
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nas fronteiras do núcleo

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Faltas de funções fornecidas pelo chamador (combiners, continuações)
  nunca são encapsuladas por esta hierarquia.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class YangException(Exception):
    """Base class para exceções internas do yang-lang.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message
