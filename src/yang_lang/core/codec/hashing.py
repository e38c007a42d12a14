# src/yang_lang/core/codec/hashing.py
"""
Hashing canônico de valores estruturados.

Payloads comprimidos não são estáveis byte a byte; a identidade estável de
um valor é o SHA-256 da sua forma textual canônica (`codec.text`).

Política de hashing (v1):
    - Texto canônico (chaves ordenadas quando comparáveis)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - O valor retornado é uma string hexadecimal de 64 caracteres
    - Valores estruturalmente equivalentes com chaves comparáveis produzem
      o mesmo hash, independentemente da ordem de inserção
"""

import hashlib
from typing import Any

from .text import write_text


def compute_value_hash(value: Any) -> str:
    canonical = write_text(value)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
