# src/yang_lang/core/config/errors.py
"""
Exceções canônicas da camada de configuração do yang-lang.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, a resolução e a validação de `Settings`.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de codec, merge ou future bridge
"""

from ..exceptions import YangException


class ConfigError(YangException):
    """
    Exceção base para erros relacionados à configuração do yang-lang.

    Todas as exceções levantadas durante carregamento e validação de
    configuração devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de defaults explicitamente
    informado não é encontrado.

    Decisões arquiteturais:
        - Sem `defaults_path`, os defaults empacotados são usados
        - Um `defaults_path` informado e ausente nunca cai nos empacotados
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


class InvalidSettingError(ConfigError):
    """
    Exceção levantada quando um valor de configuração resolvido é inválido
    (tipo errado, fora do intervalo ou seção desconhecida).

    Exemplo:
        - {"codec": {"compression_level": 12}}  → nível fora de 0..9
        - {"futures": {"max_workers": 0}}       → pool vazio

    Limites explícitos:
        - Não realiza coerção ou conversão de tipos
    """
