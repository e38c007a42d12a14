# tests/core/merge/test_deep_merge.py
"""
Testes da política de deep-merge.

Este módulo valida o comportamento de `deep_merge_with` e `merge_maps`.

Os testes asseguram que:
- chaves presentes em uma única entrada passam sem tocar o combiner
- dicionários são mesclados de forma recursiva
- folhas em conflito são resolvidas pelo combiner, na ordem das entradas
- mapa vs escalar é conflito escalar (o lado direito vence com merge_maps)
- faltas do combiner propagam verbatim
- objetos de entrada não são mutados

Limites explícitos:
    - Não valida carregamento de configuração (ver tests/core/config)
"""

import operator

import pytest

from yang_lang.core.merge import (
    NodeKind,
    deep_merge_with,
    last_wins,
    merge_maps,
    node_kind,
)


def test_merge_simple_override():
    """
    Verifica o override básico de valores escalares com `merge_maps`.

    Invariantes:
        - O valor sobrescrito reflete exatamente a entrada mais à direita
        - Chaves não sobrescritas permanecem inalteradas
        - As entradas não sofrem mutação
    """
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = merge_maps(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_default_precedence_last_wins():
    assert merge_maps({"x": 1}, {"x": 2}) == {"x": 2}
    assert merge_maps({"x": 1}, {"x": 2}, {"x": 3}) == {"x": 3}


def test_nested_maps_are_merged_not_replaced():
    assert deep_merge_with(last_wins, {"a": {"b": 1}}, {"a": {"c": 2}}) == {"a": {"b": 1, "c": 2}}


def test_key_in_single_input_bypasses_combiner():
    """
    Uma chave presente só em A chega ao resultado intacta, qualquer que
    seja o combiner (mesmo um que sempre falha).
    """

    def never(*_):
        raise AssertionError("combiner não deveria ser chamado")

    a = {"only_a": [1, 2], "nested": {"x": 1}}
    b = {"only_b": 3, "nested": {"y": 2}}
    out = deep_merge_with(never, a, b)
    assert out["only_a"] == a["only_a"]
    assert out["only_b"] == 3
    assert out["nested"] == {"x": 1, "y": 2}


def test_combiner_receives_values_in_input_order():
    calls = []

    def record(*values):
        calls.append(values)
        return sum(values)

    out = deep_merge_with(record, {"k": 1}, {"other": 0}, {"k": 2}, {"k": 3})
    assert out == {"k": 6, "other": 0}
    assert calls == [(1, 2, 3)]


def test_nested_merge_with_custom_combiner():
    out = deep_merge_with(
        operator.add,
        {"a": {"b": {"c": 1, "d": {"x": 1, "y": 2}}, "e": 3}, "f": 4},
        {"a": {"b": {"c": 2, "d": {"z": 9}, "z": 3}, "e": 100}},
    )
    assert out == {"a": {"b": {"c": 3, "d": {"x": 1, "y": 2, "z": 9}, "z": 3}, "e": 103}, "f": 4}


def test_mapping_vs_scalar_is_a_scalar_conflict():
    """
    Tipos divergentes (mapa de um lado, escalar do outro) não são mesclados:
    o combiner decide, e com `merge_maps` o lado direito substitui o esquerdo
    nos dois sentidos.
    """
    assert merge_maps({"k": {"nested": 1}}, {"k": "scalar"}) == {"k": "scalar"}
    assert merge_maps({"k": "scalar"}, {"k": {"nested": 1}}) == {"k": {"nested": 1}}

    seen = []
    deep_merge_with(lambda *vs: seen.append(vs), {"k": {"n": 1}}, {"k": 5})
    assert seen == [({"n": 1}, 5)]


def test_lists_are_leaves():
    out = merge_maps({"steps": {"enabled": ["ingest", "train"]}}, {"steps": {"enabled": ["ingest"]}})
    assert out == {"steps": {"enabled": ["ingest"]}}


def test_combiner_fault_propagates_verbatim():
    fault = ValueError("combiner exploded")

    def explode(*_):
        raise fault

    with pytest.raises(ValueError) as info:
        deep_merge_with(explode, {"k": 1}, {"k": 2})
    assert info.value is fault


def test_none_inputs_are_ignored_and_empty_call_yields_empty_dict():
    assert merge_maps() == {}
    assert merge_maps(None, {"a": 1}, None) == {"a": 1}


def test_non_mapping_input_is_rejected():
    with pytest.raises(TypeError):
        merge_maps({"a": 1}, [("a", 2)])


def test_nested_inputs_are_not_mutated():
    base = {"engine": {"fail_fast": True, "log_level": "INFO"}}
    override = {"engine": {"log_level": "DEBUG"}}
    out = merge_maps(base, override)
    assert out == {"engine": {"fail_fast": True, "log_level": "DEBUG"}}
    assert base == {"engine": {"fail_fast": True, "log_level": "INFO"}}
    assert out["engine"] is not base["engine"]


def test_node_kind_is_closed_over_mapping_and_scalar():
    assert node_kind({}) is NodeKind.MAPPING
    for value in (None, 1, "x", [1], {1}, (1,)):
        assert node_kind(value) is NodeKind.SCALAR
