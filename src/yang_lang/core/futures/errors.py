"""
Exceções canônicas da future bridge do yang-lang.

Invariantes:
    - A falta original do handle bloqueante fica em `__cause__`
    - Faltas de continuações (`then_apply`/`then_compose`) NÃO são
      encapsuladas: tornam-se, verbatim, a falha do futuro externo
"""

from ..exceptions import YangException


class AdaptationError(YangException):
    """
    Exceção que completa o futuro composável quando a espera pelo handle
    bloqueante falha (ou quando a tarefa de espera não pôde ser agendada).

    Limites explícitos:
        - Nunca é levantada de forma síncrona para quem chama `adapt`
        - Não re-tenta a espera
    """
