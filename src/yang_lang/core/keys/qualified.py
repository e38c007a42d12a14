# src/yang_lang/core/keys/qualified.py
"""
Chave qualificada por namespace.

Uma `QualifiedKey` é um identificador de dois campos:
    - namespace: segmento opcional (`None` quando ausente)
    - name: segmento obrigatório

A comparação é estrutural e case-sensitive sobre os dois campos. A forma
textual (`"a/one"`, `"one"`) existe apenas nas bordas: parsing de chaves
`str` fornecidas pelo chamador e serialização pelo codec.

Política de parsing (v1):
    - O texto é separado no **primeiro** separador
    - O separador isolado (`"/"`) é um nome sem namespace
    - Namespace vazio ou nome vazio são inválidos

Invariantes:
    - Uma chave sem namespace tem `namespace is None`, nunca `""`
    - `QualifiedKey.parse(k.text(sep), sep) == k` para toda chave `k`
      obtida via `parse` com o mesmo separador
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidQualifiedKeyError


DEFAULT_SEPARATOR = "/"


@dataclass(frozen=True)
class QualifiedKey:
    """Identificador `(namespace, name)` imutável e hashable."""

    namespace: Optional[str]
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidQualifiedKeyError(
                "Nome da chave qualificada deve ser string não vazia",
                details={"name": repr(self.name)},
            )
        if self.namespace is not None and (
            not isinstance(self.namespace, str) or not self.namespace
        ):
            raise InvalidQualifiedKeyError(
                "Namespace deve ser None ou string não vazia",
                details={"namespace": repr(self.namespace)},
                hint="Use namespace=None para chaves sem namespace",
            )

    @classmethod
    def parse(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "QualifiedKey":
        if not isinstance(text, str) or not text:
            raise InvalidQualifiedKeyError(
                "Chave qualificada vazia ou não textual",
                details={"text": repr(text)},
            )

        if text == separator or separator not in text:
            return cls(None, text)

        namespace, _, name = text.partition(separator)
        if not namespace or not name:
            raise InvalidQualifiedKeyError(
                f"Chave qualificada malformada: {text!r}",
                details={"text": text, "separator": separator},
                hint=f"Use '<namespace>{separator}<nome>' ou apenas '<nome>'",
            )
        return cls(namespace, name)

    @classmethod
    def coerce(cls, key: Any, separator: str = DEFAULT_SEPARATOR) -> "QualifiedKey":
        """Aceita `QualifiedKey` ou `str`; qualquer outro tipo é inválido."""
        if isinstance(key, QualifiedKey):
            return key
        if isinstance(key, str):
            return cls.parse(key, separator)
        raise InvalidQualifiedKeyError(
            f"Tipo de chave não suportado: {type(key).__name__}",
            details={"key": repr(key)},
        )

    def bare(self) -> "QualifiedKey":
        if self.namespace is None:
            return self
        return QualifiedKey(None, self.name)

    def text(self, separator: str = DEFAULT_SEPARATOR) -> str:
        if self.namespace is None:
            return self.name
        return f"{self.namespace}{separator}{self.name}"

    def __str__(self) -> str:
        return self.text()
