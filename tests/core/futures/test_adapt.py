# tests/core/futures/test_adapt.py
"""
Testes de `adapt`: handle bloqueante → futuro composável.

Os testes asseguram que:
- `adapt` devolve imediatamente um futuro pendente (não bloqueia)
- a espera roda no executor, nunca na thread chamadora
- falhas do handle chegam como `AdaptationError` com a causa encadeada
- falhas nunca são levantadas de forma síncrona para quem chama `adapt`

Invariantes:
    - Todo executor é encerrado pela fixture `executor`
    - Nenhum teste espera sem timeout
"""

import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from yang_lang.core.futures import AdaptationError, adapt


TIMEOUT = 5


def test_adapt_completes_with_handle_result(executor):
    handle: Future = Future()
    handle.set_result(42)
    assert adapt(handle, executor).result(timeout=TIMEOUT) == 42


def test_adapt_returns_pending_future_without_blocking(executor):
    handle: Future = Future()
    adapted = adapt(handle, executor)
    assert not adapted.done()

    handle.set_result("late")
    assert adapted.result(timeout=TIMEOUT) == "late"


def test_wait_runs_on_executor_thread(executor):
    caller = threading.current_thread().name
    seen = {}

    class RecordingHandle:
        def result(self, timeout=None):
            seen["thread"] = threading.current_thread().name
            return "ok"

    assert adapt(RecordingHandle(), executor).result(timeout=TIMEOUT) == "ok"
    assert seen["thread"] != caller
    assert seen["thread"].startswith("test-bridge")


def test_handle_fault_is_wrapped_in_adaptation_error(executor):
    """
    Dado um handle que falha com E, o futuro adaptado falha com
    AdaptationError cuja causa é exatamente E.
    """
    fault = KeyError("missing")
    handle: Future = Future()
    handle.set_exception(fault)

    adapted = adapt(handle, executor)
    with pytest.raises(AdaptationError) as info:
        adapted.result(timeout=TIMEOUT)
    assert info.value.__cause__ is fault
    assert info.value.details["exception_class"] == "KeyError"


def test_handle_fault_never_raises_synchronously(executor):
    class ExplodingHandle:
        def result(self, timeout=None):
            raise RuntimeError("boom")

    adapted = adapt(ExplodingHandle(), executor)
    assert isinstance(adapted.exception(timeout=TIMEOUT), AdaptationError)


def test_cancelled_handle_is_an_adaptation_error(executor):
    handle: Future = Future()
    handle.cancel()
    adapted = adapt(handle, executor)
    assert isinstance(adapted.exception(timeout=TIMEOUT), AdaptationError)


def test_rejected_submission_yields_failed_future():
    pool = ThreadPoolExecutor(max_workers=1)
    pool.shutdown(wait=True)

    handle: Future = Future()
    handle.set_result(1)
    adapted = adapt(handle, pool)

    assert adapted.done()
    err = adapted.exception()
    assert isinstance(err, AdaptationError)
    assert isinstance(err.__cause__, RuntimeError)


def test_base_exception_fault_is_wrapped_in_adaptation_error(executor):
    """
    Faltas que herdam só de BaseException (ex.: `asyncio.CancelledError`)
    também chegam como AdaptationError, com a causa preservada.
    """
    fault = asyncio.CancelledError()

    class CancelledHandle:
        def result(self, timeout=None):
            raise fault

    adapted = adapt(CancelledHandle(), executor)
    err = adapted.exception(timeout=TIMEOUT)
    assert isinstance(err, AdaptationError)
    assert err.__cause__ is fault
