# src/yang_lang/core/codec/text.py
"""
Forma textual canônica de valores estruturados.

Este módulo serializa valores do modelo do yang-lang em YAML legível e os
lê de volta em um grafo de valores equivalente. O leitor e o escritor são
derivados de `yaml.SafeLoader` / `yaml.SafeDumper`: nenhum objeto Python
arbitrário é construído na leitura.

Modelo de valores suportado (v1):
    - None, bool, int, float, str, bytes (!!binary)
    - dict (chaves de qualquer tipo suportado e hashable)
    - list, tuple (!tuple), set / frozenset (!!set)
    - QualifiedKey (!key)

Decisões arquiteturais:
    - Chaves ordenadas quando comparáveis (texto canônico estável)
    - Sem âncoras/aliases: referências compartilhadas são escritas por valor

Limites explícitos:
    - Estruturas recursivas e objetos fora do modelo não são suportados;
      o escritor levanta `yaml.representer.RepresenterError`
"""

from __future__ import annotations

from typing import Any

import yaml  # PyYAML

from ..keys.errors import InvalidQualifiedKeyError
from ..keys.qualified import QualifiedKey
from .errors import ParseError


KEY_TAG = "!key"
TUPLE_TAG = "!tuple"


class Dumper(yaml.SafeDumper):
    """SafeDumper com tags para chaves qualificadas e tuplas."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


class Loader(yaml.SafeLoader):
    """SafeLoader que entende as tags escritas por `Dumper`."""


def _represent_key(dumper: Dumper, key: QualifiedKey) -> yaml.Node:
    return dumper.represent_scalar(KEY_TAG, key.text())


def _represent_tuple(dumper: Dumper, data: tuple) -> yaml.Node:
    return dumper.represent_sequence(TUPLE_TAG, list(data))


def _construct_key(loader: Loader, node: yaml.Node) -> QualifiedKey:
    return QualifiedKey.parse(loader.construct_scalar(node))


def _construct_tuple(loader: Loader, node: yaml.Node) -> tuple:
    # deep=True: a tupla precisa existir completa para ser usada como chave
    return tuple(loader.construct_sequence(node, deep=True))


Dumper.add_representer(QualifiedKey, _represent_key)
Dumper.add_representer(tuple, _represent_tuple)
Dumper.add_representer(frozenset, yaml.SafeDumper.represent_set)

Loader.add_constructor(KEY_TAG, _construct_key)
Loader.add_constructor(TUPLE_TAG, _construct_tuple)


def write_text(value: Any) -> str:
    """Renderiza `value` na forma textual canônica."""
    return yaml.dump(
        value,
        Dumper=Dumper,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )


def read_text(text: str) -> Any:
    """
    Lê a forma textual canônica de volta para um valor estruturado.

    Texto vazio é lido como `None`.

    Raises:
        ParseError: Se o texto não for YAML válido, usar tags desconhecidas,
            conter chaves qualificadas malformadas, escalares tipados
            inválidos ou aninhamento além do limite de recursão.
    """
    # construtores do SafeLoader falham com exceções nativas (`!!int abc`,
    # `!!timestamp x`); aninhamento profundo estoura o composer
    try:
        return yaml.load(text, Loader=Loader)
    except (
        yaml.YAMLError,
        InvalidQualifiedKeyError,
        ValueError,
        TypeError,
        AttributeError,
        RecursionError,
    ) as exc:
        raise ParseError(
            "Texto estruturado inválido",
            details={"reason": str(exc).splitlines()[0] if str(exc) else exc.__class__.__name__},
        ) from exc
