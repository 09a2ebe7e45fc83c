"""equal_to — compare the value against a fixed value or a supplier's result."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_EQUAL_MESSAGE = "Values are not equal"


def _strictly_equal(expected: Any, value: Any) -> bool:
    # bool is an int subclass; True must not equal 1.
    if isinstance(expected, bool) is not isinstance(value, bool):
        return False
    return bool(expected == value)


def equal_to(
    expected: Any, message: str = DEFAULT_EQUAL_MESSAGE
) -> Callable[[Any], list[str]]:
    """Build a validator that passes when the value equals *expected*.

    A callable *expected* is treated as a zero-argument supplier and is
    called on every validation, so it may read state that changes (e.g.
    a "confirm password" field). Comparison uses ``==`` with no coercion:
    ``equal_to(5)("5")`` and ``equal_to(1)(True)`` fail, while
    ``equal_to(1)(1.0)`` passes.
    """
    supply: Callable[[], Any] = expected if callable(expected) else lambda: expected

    def validate(value: Any) -> list[str]:
        return [] if _strictly_equal(supply(), value) else [message]

    return validate
