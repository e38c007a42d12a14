"""
Camada de future bridge do yang-lang.

Adapta handles bloqueantes (`result()`) para `concurrent.futures.Future`
composáveis e fornece os combinadores `then_apply` / `then_compose`, com
propagação de falhas como dado.
"""

from .bridge import (
    BlockingHandle,
    adapt,
    create_executor,
    failure_of,
    then_apply,
    then_compose,
)
from .errors import AdaptationError

__all__ = [
    "AdaptationError",
    "BlockingHandle",
    "adapt",
    "create_executor",
    "failure_of",
    "then_apply",
    "then_compose",
]
