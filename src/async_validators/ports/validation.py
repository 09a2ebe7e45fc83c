"""IValidator — the contract every validator and composed validator follows."""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import Any, Protocol, runtime_checkable

Messages = Sequence[str]
ValidatorResult = Messages | Awaitable[Messages]


@runtime_checkable
class IValidator(Protocol):
    """Protocol for validators.

    A validator maps a value to an ordered sequence of error messages
    (empty means valid), either immediately or through an awaitable.
    Validators are composable via
    :func:`~async_validators.combinators.combine_async.combine_async`.
    """

    def __call__(self, value: Any) -> ValidatorResult:
        """Validate *value* and return its messages, possibly deferred."""
        ...
