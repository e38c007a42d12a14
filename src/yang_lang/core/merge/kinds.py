# src/yang_lang/core/merge/kinds.py
"""
Variante fechada de nós para o deep-merge.

O algoritmo de merge não pergunta "isto é um mapa?" em vários pontos:
classifica cada valor uma única vez em `NodeKind` e ramifica sobre esse
tipo fechado.

    - MAPPING → qualquer `collections.abc.Mapping`
    - SCALAR  → todo o resto (listas, sets e None incluídos)
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    MAPPING = "mapping"
    SCALAR = "scalar"


def node_kind(value: Any) -> NodeKind:
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    return NodeKind.SCALAR
