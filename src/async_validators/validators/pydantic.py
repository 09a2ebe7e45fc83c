"""model_validator — leverages Pydantic validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from collections.abc import Callable


def model_validator(
    schema: Any, *, include_location: bool = True
) -> Callable[[Any], list[str]]:
    """Build a validator that checks the value against a Pydantic model or type.

    Each Pydantic error becomes one message, prefixed with its dotted
    location (``"address.zip: String should have at most 5 characters"``)
    unless *include_location* is false or the error sits at the root.
    Exceptions other than Pydantic's ``ValidationError`` propagate.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(schema)

    def validate(value: Any) -> list[str]:
        try:
            adapter.validate_python(value)
        except PydanticValidationError as exc:
            messages: list[str] = []
            for error in exc.errors():
                msg = error.get("msg", "validation error")
                loc = ".".join(str(p) for p in error.get("loc", ()))
                messages.append(f"{loc}: {msg}" if include_location and loc else msg)
            return messages
        return []

    return validate
