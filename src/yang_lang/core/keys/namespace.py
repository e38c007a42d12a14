# src/yang_lang/core/keys/namespace.py
"""
Transformações de mapas por namespace de chave.

Este módulo reestrutura mapas "planos" cujas chaves carregam um namespace
(`"a/one"`, `QualifiedKey("a", "one")`) para a forma aninhada agrupada
(`{"a": {"one": ...}}`) e vice-versa.

Política (v1):
    - Chaves de entrada podem ser `str` (parseadas no primeiro separador)
      ou `QualifiedKey`
    - Nomes "nus" no resultado são sempre `str`
    - Namespaces são comparados estruturalmente, nunca por prefixo textual
    - Nenhuma entrada é mutada; todo resultado é um `dict` novo

Configuração:
    O separador textual e o bucket de chaves sem namespace vêm de
    `settings.keys` (`KeySettings`); sem `settings`, valem os defaults.

Limites explícitos:
    - Não faz merge de valores em colisões (a última entrada vence)
    - Não captura exceções de funções do chamador
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Mapping, Optional, Union

from ..config.settings import DEFAULT_SETTINGS, KeySettings, Settings
from .qualified import QualifiedKey


Namespace = Union[str, QualifiedKey]

# marca "bucket não informado": None é um bucket válido
_FROM_SETTINGS: Any = object()


def _key_settings(settings: Optional[Settings]) -> KeySettings:
    return (settings or DEFAULT_SETTINGS).keys


def _namespace_name(namespace: Namespace) -> str:
    # QualifiedKey como designador de namespace vale pelo nome (`:a` -> "a")
    if isinstance(namespace, QualifiedKey):
        return namespace.name
    return namespace


def map_keys(mapping: Mapping[Any, Any], fn: Callable[[Any], Hashable]) -> Dict[Any, Any]:
    """Aplica `fn` a cada chave de `mapping`."""
    return {fn(k): v for k, v in mapping.items()}


def map_values(mapping: Mapping[Any, Any], fn: Callable[[Any], Any]) -> Dict[Any, Any]:
    """Aplica `fn` a cada valor de `mapping`."""
    return {k: fn(v) for k, v in mapping.items()}


def strip_namespace(
    mapping: Mapping[Any, Any],
    namespace: Optional[Namespace] = None,
    *,
    settings: Optional[Settings] = None,
) -> Dict[Any, Any]:
    """
    Remove namespaces das chaves, ou remove as entradas de um namespace.

    Sem `namespace`:
        Cada chave é substituída pelo seu nome nu (`str`). Quando duas
        chaves de namespaces diferentes compartilham o nome, vence a última
        na ordem de iteração de `mapping`; isto é uma ambiguidade aceita,
        não uma política garantida.

    Com `namespace`:
        Mantém apenas as entradas cujo namespace é diferente do informado.
        As chaves mantidas não são alteradas.

    Raises:
        InvalidQualifiedKeyError: Se alguma chave não for `str`/`QualifiedKey`
            ou estiver malformada.
    """
    separator = _key_settings(settings).separator

    if namespace is None:
        return map_keys(mapping, lambda k: QualifiedKey.coerce(k, separator).name)

    ns = _namespace_name(namespace)
    return {
        k: v
        for k, v in mapping.items()
        if QualifiedKey.coerce(k, separator).namespace != ns
    }


def extract_namespace(
    mapping: Mapping[Any, Any],
    namespace: Namespace,
    *,
    settings: Optional[Settings] = None,
) -> Dict[Any, Dict[str, Any]]:
    """
    Extrai as entradas de um namespace para um mapa aninhado.

    => extract_namespace({"a/one": 1, "a/two": 2, "b/one": 9}, "a")
       {"a": {"one": 1, "two": 2}}

    O mapa interno existe sempre, vazio quando nada corresponde.
    """
    separator = _key_settings(settings).separator
    ns = _namespace_name(namespace)
    inner: Dict[str, Any] = {}
    for k, v in mapping.items():
        key = QualifiedKey.coerce(k, separator)
        if key.namespace == ns:
            inner[key.name] = v
    return {namespace: inner}


def group_by_namespace(
    mapping: Mapping[Any, Any],
    bucket: Optional[Hashable] = _FROM_SETTINGS,
    *,
    settings: Optional[Settings] = None,
) -> Dict[Any, Dict[str, Any]]:
    """
    Particiona as entradas por namespace.

    => group_by_namespace({"a/one": 1, "b/one": 9, "a/two": 2, "b/two": 8})
       {"a": {"one": 1, "two": 2}, "b": {"one": 9, "two": 8}}

    Chaves sem namespace vão para o bucket reservado: `bucket` quando
    informado, senão `settings.keys.no_namespace_bucket` (padrão `None`,
    que nunca colide com um namespace textual).
    """
    cfg = _key_settings(settings)
    if bucket is _FROM_SETTINGS:
        bucket = cfg.no_namespace_bucket

    groups: Dict[Any, Dict[str, Any]] = {}
    for k, v in mapping.items():
        key = QualifiedKey.coerce(k, cfg.separator)
        outer = bucket if key.namespace is None else key.namespace
        groups.setdefault(outer, {})[key.name] = v
    return groups


def replace_in_key(
    key: Union[str, QualifiedKey],
    old: str,
    new: str,
    *,
    settings: Optional[Settings] = None,
) -> Union[str, QualifiedKey]:
    """
    Substitui todas as ocorrências de `old` por `new` na forma textual da chave.

    => replace_in_key("foo-bar-baz", "bar", "zoo")
       "foo-zoo-baz"

    Chaves `str` continuam `str`. Chaves `QualifiedKey` são re-parseadas a
    partir do texto resultante, então a substituição também alcança o
    namespace.
    """
    if not old:
        raise ValueError("replace_in_key requer `old` não vazio")

    if isinstance(key, str):
        return key.replace(old, new)

    separator = _key_settings(settings).separator
    text = QualifiedKey.coerce(key, separator).text(separator)
    return QualifiedKey.parse(text.replace(old, new), separator)


def replace_in_keys(
    mapping: Mapping[Any, Any],
    old: str,
    new: str,
    *,
    settings: Optional[Settings] = None,
) -> Dict[Any, Any]:
    """Aplica `replace_in_key` (todas as ocorrências) a cada chave."""
    return map_keys(mapping, lambda k: replace_in_key(k, old, new, settings=settings))


def dash_keys(
    mapping: Mapping[Any, Any],
    old: str = "_",
    *,
    settings: Optional[Settings] = None,
) -> Dict[Any, Any]:
    return replace_in_keys(mapping, old, "-", settings=settings)


def underscore_keys(
    mapping: Mapping[Any, Any],
    old: str = "-",
    *,
    settings: Optional[Settings] = None,
) -> Dict[Any, Any]:
    return replace_in_keys(mapping, old, "_", settings=settings)
