"""Helpers shared by the combinators."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..exceptions import InvalidValidatorsError


def freeze_validators(validators: Any, combinator: str) -> tuple[Any, ...]:
    """Snapshot *validators* into a tuple.

    Raises:
        InvalidValidatorsError: *validators* is not an ordered sequence.
    """
    if isinstance(validators, (str, bytes, bytearray)) or not isinstance(
        validators, Sequence
    ):
        raise InvalidValidatorsError(validators, combinator)
    return tuple(validators)
