"""
Camada de chaves qualificadas do yang-lang.

Este pacote define o identificador de dois campos `QualifiedKey`
(namespace, nome) e as transformações puras que reestruturam mapas planos
com chaves qualificadas em mapas aninhados por namespace, e vice-versa.

Princípios fundamentais:
    - Namespaces são comparados estruturalmente, nunca por prefixo textual
    - Todas as operações são puras e devolvem dicionários novos
    - Chaves sem namespace são tratadas por política explícita (bucket)

Limites explícitos:
    - Não faz merge de valores (ver `core.merge`)
    - Não serializa chaves (ver `core.codec`)
"""

from .errors import InvalidQualifiedKeyError
from .namespace import (
    dash_keys,
    extract_namespace,
    group_by_namespace,
    map_keys,
    map_values,
    replace_in_key,
    replace_in_keys,
    strip_namespace,
    underscore_keys,
)
from .qualified import DEFAULT_SEPARATOR, QualifiedKey

__all__ = [
    "DEFAULT_SEPARATOR",
    "InvalidQualifiedKeyError",
    "QualifiedKey",
    "dash_keys",
    "extract_namespace",
    "group_by_namespace",
    "map_keys",
    "map_values",
    "replace_in_key",
    "replace_in_keys",
    "strip_namespace",
    "underscore_keys",
]
