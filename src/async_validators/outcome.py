"""Outcome — tagged view of what a validator returned.

A validator either answers straight away (:class:`Immediate`) or hands
back an awaitable (:class:`Deferred`). :func:`classify` inspects the raw
return value once, at the boundary, so the combinators never have to
guess its shape again.
"""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from inspect import isawaitable
from typing import Any

from .exceptions import InvalidResultError


@dataclass(frozen=True)
class Immediate:
    """Messages returned synchronously by a validator."""

    messages: list[str]

    @property
    def is_valid(self) -> bool:
        return not self.messages


@dataclass(frozen=True)
class Deferred:
    """An awaitable that will eventually yield messages."""

    awaitable: Awaitable[Sequence[str]]


Outcome = Immediate | Deferred


def resolve_messages(raw: Any) -> list[str]:
    """Check that *raw* is a sequence of message strings and copy it to a list.

    Raises:
        InvalidResultError: *raw* is not a list/tuple of ``str``.
    """
    if isinstance(raw, (str, bytes, bytearray)) or not isinstance(raw, Sequence):
        raise InvalidResultError(raw)

    messages = list(raw)
    for message in messages:
        if not isinstance(message, str):
            raise InvalidResultError(
                raw, reason=f"message {message!r} is not a string"
            )
    return messages


def classify(raw: Any) -> Outcome:
    """Tag a validator's return value as :class:`Immediate` or :class:`Deferred`."""
    if isawaitable(raw):
        return Deferred(raw)
    return Immediate(resolve_messages(raw))
