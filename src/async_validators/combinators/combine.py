"""combine — synchronous counterpart of :func:`combine_async`."""

from __future__ import annotations

import logging
from inspect import iscoroutine
from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidResultError
from ..outcome import Deferred, Immediate, classify
from .utils import freeze_validators

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.validation import IValidator

logger = logging.getLogger("async_validators.combine")


def _immediate(validator: IValidator, value: Any) -> Immediate:
    outcome = classify(validator(value))
    if isinstance(outcome, Deferred):
        if iscoroutine(outcome.awaitable):
            outcome.awaitable.close()
        raise InvalidResultError(
            outcome.awaitable,
            reason="asynchronous validators need combine_async",
        )
    return outcome


class SyncCombinedValidator:
    """Composed validator produced by :func:`combine`.

    In first-error mode validators after the first failing one are never
    invoked.
    """

    def __init__(self, validators: Sequence[IValidator], run_all: bool = False) -> None:
        self._validators: tuple[IValidator, ...] = freeze_validators(
            validators, "combine"
        )
        self._run_all = bool(run_all)
        logger.debug(
            "Combined %d synchronous validator(s) (run_all=%s)",
            len(self._validators),
            self._run_all,
        )

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

    def __call__(self, value: Any) -> list[str]:
        if self._run_all:
            return [
                message
                for validator in self._validators
                for message in _immediate(validator, value).messages
            ]

        for validator in self._validators:
            outcome = _immediate(validator, value)
            if outcome.messages:
                return outcome.messages
        return []


def combine(
    validators: Sequence[IValidator], run_all: bool = False
) -> SyncCombinedValidator:
    """Combine synchronous *validators* into one validator.

    Raises:
        InvalidValidatorsError: *validators* is not a list or tuple.
    """
    return SyncCombinedValidator(validators, run_all=run_all)
