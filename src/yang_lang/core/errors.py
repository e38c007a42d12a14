"""
yang-lang — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do yang-lang como dado.
Nenhum componente do núcleo registra ou imprime falhas: elas são
propagadas como exceção ou carregadas como falha de um futuro. Quando o
chamador precisa transportar essa falha (log estruturado, resposta de API,
relatório), converte-a em `ErrorPayload`.

Um ErrorPayload é:

- explícito
- serializável
- acionável (quando há `hint`)
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional

from .exceptions import YangException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do yang-lang.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Chaves qualificadas
INVALID_QUALIFIED_KEY = "INVALID_QUALIFIED_KEY"

# Codec
CODEC_DECODE_ERROR = "CODEC_DECODE_ERROR"
CODEC_PARSE_ERROR = "CODEC_PARSE_ERROR"

# Future bridge
FUTURE_ADAPTATION_ERROR = "FUTURE_ADAPTATION_ERROR"
CONTINUATION_ERROR = "CONTINUATION_ERROR"

# Configuração
CONFIG_ERROR = "CONFIG_ERROR"


def _error_type_for(exc: BaseException) -> str:
    # imports locais: core.futures.bridge importa este módulo durante sua inicialização
    from .codec.errors import DecodeError, ParseError
    from .config.errors import ConfigError
    from .futures.errors import AdaptationError
    from .keys.errors import InvalidQualifiedKeyError

    if isinstance(exc, InvalidQualifiedKeyError):
        return INVALID_QUALIFIED_KEY
    if isinstance(exc, DecodeError):
        return CODEC_DECODE_ERROR
    if isinstance(exc, ParseError):
        return CODEC_PARSE_ERROR
    if isinstance(exc, AdaptationError):
        return FUTURE_ADAPTATION_ERROR
    if isinstance(exc, ConfigError):
        return CONFIG_ERROR
    return CONTINUATION_ERROR


def exception_to_error(exc: BaseException) -> ErrorPayload:
    """Converte exceções em ErrorPayload (serializável, acionável).

    Regras:
    - YangException: já vem com message/details/hint.
    - Outras exceções (faltas de combiners ou continuações do chamador):
      encapsular como CONTINUATION_ERROR sem expor stack trace.
    - A causa encadeada (`__cause__`), quando existe, é descrita em
      `details["cause"]`.
    """
    if isinstance(exc, YangException):
        details = dict(exc.details)
        hint = exc.hint
        message = exc.message or "Erro no yang-lang"
    else:
        details = {"exception_class": exc.__class__.__name__}
        hint = None
        message = str(exc) or "Erro inesperado em função do chamador"

    cause = exc.__cause__
    if cause is not None and "cause" not in details:
        details["cause"] = {
            "exception_class": cause.__class__.__name__,
            "message": str(cause),
        }

    return ErrorPayload(
        type=_error_type_for(exc),
        message=message,
        details=details,
        hint=hint,
    )
