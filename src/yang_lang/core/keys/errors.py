"""
Exceções canônicas da camada de chaves qualificadas do yang-lang.

Invariantes:
    - Todas as exceções desta camada herdam de `YangException`
    - Faltas de funções do chamador (`map_keys`, `map_values`) nunca são
      encapsuladas aqui
"""

from ..exceptions import YangException


class InvalidQualifiedKeyError(YangException):
    """
    Exceção levantada quando um valor não pode ser interpretado como
    chave qualificada.

    Exemplos de entrada inválida:
        - ""       (nome vazio)
        - "/one"   (namespace vazio)
        - "a/"     (nome vazio)
        - 42       (tipo não suportado)

    Limites explícitos:
        - Não tenta normalizar caixa, espaços ou separadores
    """
