"""combine_async — run several validators against one value.

Two modes:

* **first error** (default): every validator is invoked in declaration
  order until one answers synchronously with messages. Whichever
  validator, synchronous or not, is first to *settle* with messages wins;
  anything settling afterwards is discarded.
* **run all**: every validator is invoked, everything is awaited, and the
  messages are concatenated in declaration order.

Operational failures (a validator raising, or its awaitable failing) are
never turned into messages; they fail the composed call.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ..outcome import Deferred, classify, resolve_messages
from .utils import freeze_validators

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Sequence

    from ..ports.validation import IValidator

logger = logging.getLogger("async_validators.combine")

# Deferred validators still running after their composed call settled.
_in_flight: set[asyncio.Future[Any]] = set()


def _on_detached_done(future: asyncio.Future[Any]) -> None:
    """Logs late failures instead of swallowing them."""
    _in_flight.discard(future)
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.warning(
            "Validator failed after the combined result was settled: %s",
            exc,
            exc_info=exc,
        )


def _failed_with(future: asyncio.Future[Any], exc: BaseException) -> bool:
    return future.done() and not future.cancelled() and future.exception() is exc


def _detach(futures: Iterable[asyncio.Future[Any]]) -> None:
    for future in futures:
        if future.done():
            _on_detached_done(future)
            continue
        _in_flight.add(future)
        future.add_done_callback(_on_detached_done)


class CombinedValidator:
    """Composed validator produced by :func:`combine_async`.

    Always asynchronous: ``await combined(value)`` yields a ``list[str]``.
    The validator collection and mode are fixed at construction; each
    call keeps its own bookkeeping, so one instance may serve many
    concurrent calls.
    """

    def __init__(self, validators: Sequence[IValidator], run_all: bool = False) -> None:
        self._validators: tuple[IValidator, ...] = freeze_validators(
            validators, "combine_async"
        )
        self._run_all = bool(run_all)
        self._strategy = self._select_strategy()

    @property
    def validators(self) -> tuple[IValidator, ...]:
        return self._validators

    @property
    def run_all(self) -> bool:
        return self._run_all

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(validators={len(self._validators)}, "
            f"run_all={self._run_all})"
        )

    async def __call__(self, value: Any) -> list[str]:
        return await self._strategy(value)

    # ── Strategy selection ───────────────────────────────────────

    def _select_strategy(self) -> Callable[[Any], Awaitable[list[str]]]:
        count = len(self._validators)
        if count == 0:
            strategy = self._validate_nothing
        elif count == 1:
            strategy = self._validate_single
        elif self._run_all:
            strategy = self._validate_all
        else:
            strategy = self._validate_first_error

        logger.debug(
            "Combined %d validator(s) using %s", count, strategy.__name__.lstrip("_")
        )
        return strategy

    # ── Strategies ───────────────────────────────────────────────

    async def _validate_nothing(self, _value: Any) -> list[str]:
        return []

    async def _validate_single(self, value: Any) -> list[str]:
        """Pass-through: no combination logic for a lone validator."""
        outcome = classify(self._validators[0](value))
        if isinstance(outcome, Deferred):
            return resolve_messages(await outcome.awaitable)
        return outcome.messages

    async def _validate_all(self, value: Any) -> list[str]:
        results: list[list[str]] = []
        pending: dict[int, asyncio.Future[Any]] = {}

        try:
            for index, validator in enumerate(self._validators):
                outcome = classify(validator(value))
                if isinstance(outcome, Deferred):
                    pending[index] = asyncio.ensure_future(outcome.awaitable)
                    results.append([])
                else:
                    results.append(outcome.messages)
        except Exception:
            _detach(pending.values())
            raise

        if pending:
            # Shielded so that cancelling this call leaves the validators running.
            try:
                resolved = await asyncio.shield(asyncio.gather(*pending.values()))
            except BaseException as exc:
                _detach(
                    future
                    for future in pending.values()
                    if not _failed_with(future, exc)
                )
                raise
            for index, raw in zip(pending, resolved):
                results[index] = resolve_messages(raw)

        return [message for messages in results for message in messages]

    async def _validate_first_error(self, value: Any) -> list[str]:
        loop = asyncio.get_running_loop()
        # Single-assignment slot: once done, every later outcome is stale.
        settled: asyncio.Future[list[str]] = loop.create_future()
        remaining = len(self._validators)

        def record(messages: list[str]) -> None:
            nonlocal remaining
            if messages:
                settled.set_result(messages)
                return
            remaining -= 1
            if remaining == 0:
                settled.set_result([])

        def on_settled(future: asyncio.Future[Any]) -> None:
            if future.cancelled():
                if not settled.done():
                    settled.cancel()
                return

            exc = future.exception()
            if settled.done():
                if exc is not None:
                    _on_detached_done(future)
                else:
                    logger.debug("Discarding late validator result %r", future.result())
                return

            if exc is not None:
                settled.set_exception(exc)
                return

            try:
                messages = resolve_messages(future.result())
            except Exception as invalid:
                settled.set_exception(invalid)
                return
            record(messages)

        for validator in self._validators:
            if settled.done():
                break

            try:
                outcome = classify(validator(value))
            except Exception as exc:
                settled.set_exception(exc)
                break

            if isinstance(outcome, Deferred):
                future = asyncio.ensure_future(outcome.awaitable)
                _in_flight.add(future)
                future.add_done_callback(_in_flight.discard)
                future.add_done_callback(on_settled)
            else:
                record(outcome.messages)

        return await settled


def combine_async(
    validators: Sequence[IValidator], run_all: bool = False
) -> CombinedValidator:
    """Combine *validators* into one asynchronous validator.

    Args:
        validators: Ordered list or tuple of validators.
        run_all: Collect every validator's messages instead of stopping
            at the first error.

    Raises:
        InvalidValidatorsError: *validators* is not a list or tuple.

    Usage::

        check = combine_async([equal_to(5), is_unique_in_db])
        messages = await check(value)
    """
    return CombinedValidator(validators, run_all=run_all)
