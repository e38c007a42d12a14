# src/yang_lang/core/merge/deep.py
"""
Deep-merge recursivo com resolução de conflitos pelo chamador.

Este módulo implementa o merge de N mapas aninhados usado pelo yang-lang
(inclusive na resolução de configuração defaults + overrides).

Política de merge (v1):
    - chave presente em uma única entrada → valor repassado sem alteração
    - chave em ≥2 entradas, todos os valores MAPPING → merge recursivo
    - chave em ≥2 entradas, algum valor SCALAR → `combiner(v1, ..., vk)`
      na ordem das entradas
    - mapa vs escalar é conflito escalar: o combiner decide (com
      `last_wins`, o lado direito substitui o esquerdo)

Princípios fundamentais:
    - O merge é puramente funcional (nenhuma entrada é mutada)
    - Faltas do combiner propagam verbatim, sem captura
    - Entradas `None` são ignoradas, como em um merge de mapas vazio

Limites explícitos:
    - Não faz merge elemento a elemento de listas ou sets
    - Não realiza coerção de tipos
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .kinds import NodeKind, node_kind


Combiner = Callable[..., Any]


def last_wins(*values: Any) -> Any:
    """Combiner padrão: devolve o valor mais à direita."""
    return values[-1]


def _merge_level(combiner: Combiner, mappings: Sequence[Mapping[Any, Any]]) -> Dict[Any, Any]:
    # união das chaves na ordem de primeira aparição, valores na ordem das entradas
    collected: Dict[Any, List[Any]] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            collected.setdefault(key, []).append(value)

    result: Dict[Any, Any] = {}
    for key, values in collected.items():
        if len(values) == 1:
            result[key] = values[0]
            continue

        kinds = {node_kind(v) for v in values}
        if kinds == {NodeKind.MAPPING}:
            result[key] = _merge_level(combiner, values)
        else:
            result[key] = combiner(*values)

    return result


def deep_merge_with(combiner: Combiner, *mappings: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """
    Mescla recursivamente `mappings`, aplicando `combiner` apenas quando há
    um valor não-mapa em uma chave compartilhada.

    => deep_merge_with(operator.add,
                       {"a": {"b": {"c": 1, "d": {"x": 1, "y": 2}}, "e": 3}, "f": 4},
                       {"a": {"b": {"c": 2, "d": {"z": 9}, "z": 3}, "e": 100}})
       {"a": {"b": {"c": 3, "d": {"x": 1, "y": 2, "z": 9}, "z": 3}, "e": 103}, "f": 4}

    Args:
        combiner: Função variádica que resolve conflitos escalares.
        *mappings: Mapas de entrada (da menor para a maior precedência).

    Returns:
        Dict[Any, Any]: Novo dicionário resultante.

    Raises:
        TypeError: Se alguma entrada não for Mapping nem None.
        Exception: Qualquer falta levantada por `combiner`, sem alteração.
    """
    present: List[Mapping[Any, Any]] = []
    for index, mapping in enumerate(mappings):
        if mapping is None:
            continue
        if node_kind(mapping) is not NodeKind.MAPPING:
            raise TypeError(
                f"deep_merge_with requer mapas, entrada {index} é {type(mapping).__name__}"
            )
        present.append(mapping)

    return _merge_level(combiner, present)


def merge_maps(*mappings: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """Deep-merge com `last_wins`: entradas posteriores vencem nas folhas."""
    return deep_merge_with(last_wins, *mappings)
