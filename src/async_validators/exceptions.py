"""Exception hierarchy for async-validators.

Validation failures are *results* (lists of messages), not exceptions.
The classes below signal operational problems: bad construction
arguments, validators breaking their return contract, and the explicit
opt-in raised by :func:`~async_validators.guard.ensure_valid`.
"""

from __future__ import annotations

from typing import Any


class AsyncValidatorsError(Exception):
    """Root exception for the async-validators package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidValidatorsError(AsyncValidatorsError, TypeError):
    """Raised at construction time when the validator collection is not a sequence."""

    def __init__(self, validators: object, combinator: str = "combine_async") -> None:
        self.validators = validators
        self.combinator = combinator
        super().__init__(
            f"{combinator} requires that validators are a list or tuple of "
            f"callables, got {type(validators).__name__}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_VALIDATORS",
            "message": str(self),
            "received_type": type(self.validators).__name__,
        }


class InvalidResultError(AsyncValidatorsError, TypeError):
    """A validator returned something other than messages or an awaitable of them."""

    def __init__(self, result: object, reason: str | None = None) -> None:
        self.result = result
        self.reason = reason

        msg = (
            "Validators must return a list of message strings or an awaitable "
            f"of one, got {type(result).__name__}"
        )
        if reason:
            msg += f" - {reason}"

        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_RESULT",
            "message": str(self),
            "result_type": type(self.result).__name__,
        }


class ValidationError(AsyncValidatorsError):
    """Raised by ``ensure_valid`` when a value fails validation.

    Carries the ordered list of messages produced by the validator.
    """

    def __init__(self, messages: list[str] | str | None = None) -> None:
        if isinstance(messages, str):
            self.messages: list[str] = [messages]
        elif messages is None:
            self.messages = []
        else:
            self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Validation failed")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "messages": list(self.messages),
        }
