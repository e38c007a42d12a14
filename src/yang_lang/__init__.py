# src/yang_lang/__init__.py
"""
yang-lang — utilitários de transformação e interoperabilidade de dados.

Este pacote raiz define o namespace público do yang-lang: funções puras e
adaptadores que movem dados estruturados através de uma fronteira.

Arquitetura em alto nível:
    - core.keys    → chaves qualificadas por namespace e transformações de mapas
    - core.merge   → deep-merge recursivo com resolução de conflitos
    - core.codec   → texto canônico (YAML) + compressão gzip round-trip
    - core.futures → bridge de handles bloqueantes para futuros composáveis
    - core.config  → Settings tipados (defaults empacotados + overrides)

Nota importante:
    O pacote só registra um `NullHandler`; a configuração de logging é
    responsabilidade da aplicação.
"""

import logging

from .core.codec import (
    DecodeError,
    ParseError,
    compress,
    compute_value_hash,
    decompress,
    read_text,
    write_text,
)
from .core.config import Settings, load_settings
from .core.errors import ErrorPayload, exception_to_error
from .core.futures import AdaptationError, adapt, then_apply, then_compose
from .core.keys import (
    QualifiedKey,
    extract_namespace,
    group_by_namespace,
    replace_in_keys,
    strip_namespace,
)
from .core.merge import deep_merge_with, merge_maps

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AdaptationError",
    "DecodeError",
    "ErrorPayload",
    "ParseError",
    "QualifiedKey",
    "Settings",
    "adapt",
    "compress",
    "compute_value_hash",
    "decompress",
    "deep_merge_with",
    "exception_to_error",
    "extract_namespace",
    "group_by_namespace",
    "load_settings",
    "merge_maps",
    "read_text",
    "replace_in_keys",
    "strip_namespace",
    "then_apply",
    "then_compose",
    "write_text",
]
