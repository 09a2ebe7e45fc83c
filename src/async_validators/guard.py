"""ensure_valid — raise instead of returning messages."""

from __future__ import annotations

from inspect import isawaitable
from typing import TYPE_CHECKING, Any

from .exceptions import ValidationError
from .outcome import resolve_messages

if TYPE_CHECKING:
    from .ports.validation import IValidator


async def ensure_valid(validator: IValidator, value: Any) -> None:
    """Run *validator* against *value*.

    If validation fails, raises ValidationError carrying the messages.
    Errors raised by the validator itself propagate unchanged.
    """
    result = validator(value)
    if isawaitable(result):
        result = await result
    messages = resolve_messages(result)
    if messages:
        raise ValidationError(messages)
