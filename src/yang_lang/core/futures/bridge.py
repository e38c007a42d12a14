# src/yang_lang/core/futures/bridge.py
"""
Future bridge: handle bloqueante → futuro composável.

Este módulo adapta um resultado de computação bloqueante (já em execução
ou já concluído) para um `concurrent.futures.Future` que aceita
continuações encadeadas, e fornece os dois combinadores de encadeamento.

    adapt(handle, executor)  → espera em `handle.result()` no executor
    then_apply(future, fn)   → transforma o valor de sucesso
    then_compose(future, fn) → encadeia um futuro produzido por `fn`

Princípios fundamentais:
    - Faltas nunca atravessam a fronteira assíncrona como exceção: são
      sempre carregadas como falha de futuro
    - Falha upstream curto-circuita: a continuação não é chamada e a
      mesma exceção chega ao futuro externo
    - A bridge não tem scheduler próprio; só o executor do chamador roda
      a espera bloqueante

Decisões arquiteturais:
    - Continuações rodam na thread que conclui o upstream (ou na thread
      chamadora, se o upstream já estiver concluído)
    - Cancelamento upstream chega ao futuro externo como `CancelledError`
    - Se o chamador cancelar o futuro externo antes da conclusão upstream,
      a continuação é descartada

Limites explícitos:
    - Não propaga cancelamento nem timeout para o handle bloqueante
    - Não garante ordem entre continuações irmãs
"""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Optional, Protocol

from ..config.settings import DEFAULT_SETTINGS, FutureSettings
from ..errors import ErrorPayload, exception_to_error
from .errors import AdaptationError


logger = logging.getLogger(__name__)


class BlockingHandle(Protocol):
    """Qualquer objeto com `result()` bloqueante (ex.: `concurrent.futures.Future`)."""

    def result(self, timeout: Optional[float] = None) -> Any:
        ...


def _adaptation_error(exc: BaseException, message: str) -> AdaptationError:
    error = AdaptationError(
        message,
        details={
            "exception_class": exc.__class__.__name__,
            "message": str(exc),
        },
    )
    error.__cause__ = exc
    return error


def _wait_on(handle: BlockingHandle) -> Any:
    try:
        return handle.result()
    except (KeyboardInterrupt, SystemExit):
        raise
    except BaseException as exc:
        logger.debug("adapt: handle falhou com %s", exc.__class__.__name__)
        raise _adaptation_error(exc, "Falha ao aguardar o handle bloqueante") from exc


def adapt(handle: BlockingHandle, executor: Executor) -> Future:
    """
    Agenda no `executor` a espera por `handle` e devolve um futuro pendente.

    Nunca bloqueia e nunca levanta: falhas do handle, ou do próprio
    agendamento (executor encerrado), completam o futuro devolvido com
    `AdaptationError`, com a falta original em `__cause__`.
    """
    try:
        future = executor.submit(_wait_on, handle)
    except Exception as exc:
        logger.debug("adapt: executor recusou a tarefa (%s)", exc.__class__.__name__)
        failed: Future = Future()
        failed.set_exception(
            _adaptation_error(exc, "Executor recusou a tarefa de adaptação")
        )
        return failed

    logger.debug("adapt: espera agendada para %r", handle)
    return future


def _forward_failure(source: Future, target: Future) -> bool:
    """Copia cancelamento/falha de `source` para `target`; True se copiou."""
    if source.cancelled():
        target.set_exception(CancelledError())
        return True

    exc = source.exception()
    if exc is not None:
        target.set_exception(exc)
        return True

    return False


def then_apply(future: Future, fn: Callable[[Any], Any]) -> Future:
    """
    Futuro concluído com `fn(x)` quando `future` conclui com `x`.

    Uma falta de `fn` torna-se a falha do futuro devolvido.
    """
    outer: Future = Future()

    def _continue(upstream: Future) -> None:
        if not outer.set_running_or_notify_cancel():
            return
        if _forward_failure(upstream, outer):
            return
        try:
            value = fn(upstream.result())
        except Exception as exc:
            outer.set_exception(exc)
            return
        outer.set_result(value)

    future.add_done_callback(_continue)
    return outer


def then_compose(future: Future, fn: Callable[[Any], Future]) -> Future:
    """
    Futuro que espelha `fn(x)` quando `future` conclui com `x`.

    `fn` deve devolver um `concurrent.futures.Future`; qualquer outro
    retorno falha o futuro externo com `TypeError`.
    """
    outer: Future = Future()

    def _mirror(inner: Future) -> None:
        if _forward_failure(inner, outer):
            return
        outer.set_result(inner.result())

    def _continue(upstream: Future) -> None:
        if not outer.set_running_or_notify_cancel():
            return
        if _forward_failure(upstream, outer):
            return
        try:
            inner = fn(upstream.result())
            if not isinstance(inner, Future):
                raise TypeError(
                    f"then_compose requer que fn devolva Future, recebido: {type(inner).__name__}"
                )
        except Exception as exc:
            outer.set_exception(exc)
            return
        inner.add_done_callback(_mirror)

    future.add_done_callback(_continue)
    return outer


def create_executor(settings: Optional[FutureSettings] = None) -> ThreadPoolExecutor:
    """Cria o pool de threads para `adapt` a partir da configuração."""
    cfg = settings or DEFAULT_SETTINGS.futures
    return ThreadPoolExecutor(
        max_workers=cfg.max_workers,
        thread_name_prefix=cfg.thread_name_prefix,
    )


def failure_of(future: Future) -> Optional[ErrorPayload]:
    """
    Descreve como dado a falha de um futuro concluído.

    Returns:
        None se o futuro concluiu com sucesso; ErrorPayload caso contrário.

    Raises:
        ValueError: Se o futuro ainda não concluiu.
    """
    if not future.done():
        raise ValueError("failure_of requer um futuro concluído")

    if future.cancelled():
        return exception_to_error(CancelledError())

    exc = future.exception()
    if exc is None:
        return None
    return exception_to_error(exc)
