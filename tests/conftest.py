# tests/conftest.py
"""
Fixtures compartilhados para testes do yang-lang.

Este módulo define fixtures reutilizáveis que fornecem:
- mapas planos com chaves qualificadas por namespace
- um executor de threads com encerramento garantido
- arquivos de configuração (defaults + override local) em `tmp_path`

Invariantes:
    - Nenhuma fixture depende de variáveis de ambiente
    - Dados retornados são determinísticos e isolados por teste
    - Todo executor criado aqui é encerrado ao fim do teste

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Chaves qualificadas
# =====================================================

@pytest.fixture
def qualified_mapping() -> dict:
    """Mapa plano com dois namespaces (`a`, `b`) e dois nomes cada."""
    return {
        "a/one": 1,
        "a/two": 2,
        "b/one": 9,
        "b/two": 8,
    }


# =====================================================
# Future bridge
# =====================================================

@pytest.fixture
def executor():
    """
    Pool de threads para a future bridge.

    O pool é encerrado com `wait=True` ao fim do teste, garantindo que
    nenhuma tarefa de espera sobreviva entre testes.
    """
    from yang_lang.core.config import FutureSettings
    from yang_lang.core.futures import create_executor

    pool = create_executor(FutureSettings(max_workers=2, thread_name_prefix="test-bridge"))
    yield pool
    pool.shutdown(wait=True)


# =====================================================
# Configuração
# =====================================================

@pytest.fixture
def defaults_yaml() -> str:
    """Conteúdo típico de um `defaults.yaml` de projeto."""
    return (
        "codec:\n"
        "  compression_level: 6\n"
        "  encoding: utf-8\n"
        "keys:\n"
        "  separator: /\n"
        "futures:\n"
        "  max_workers: 8\n"
        "  thread_name_prefix: app-bridge\n"
    )


@pytest.fixture
def local_yaml() -> str:
    """Override local parcial: altera apenas uma folha de cada seção."""
    return (
        "codec:\n"
        "  compression_level: 1\n"
        "futures:\n"
        "  max_workers: 2\n"
    )


@pytest.fixture
def config_files(tmp_path, defaults_yaml, local_yaml):
    """Escreve defaults e override local em `tmp_path` e devolve os caminhos."""
    defaults_path = tmp_path / "config.defaults.yaml"
    local_path = tmp_path / "config.local.yaml"
    defaults_path.write_text(defaults_yaml, encoding="utf-8")
    local_path.write_text(local_yaml, encoding="utf-8")
    return defaults_path, local_path
