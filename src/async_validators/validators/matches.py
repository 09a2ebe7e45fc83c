"""matches — test the value's string form against a regular expression."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_MATCH_MESSAGE = "Value doesnt match pattern"


def matches(
    pattern: str | re.Pattern[str],
    message: str = DEFAULT_MATCH_MESSAGE,
    *,
    flags: int = 0,
) -> Callable[[Any], list[str]]:
    """Build a validator that passes when *pattern* is found in ``str(value)``.

    String patterns are compiled once, here. The search is unanchored;
    use ``^``/``$`` to match the whole value.
    """
    if isinstance(pattern, str):
        compiled = re.compile(pattern, flags)
    elif flags:
        raise ValueError("flags cannot be used with a compiled pattern")
    else:
        compiled = pattern

    def validate(value: Any) -> list[str]:
        return [] if compiled.search(str(value)) else [message]

    return validate
