"""async-validators — composable validators with an async-aware combinator.

A validator maps a value to a list of error messages (empty means
valid), either directly or through an awaitable. ``combine_async`` runs
several of them against one value and returns the first failure or all
of them.
"""

from __future__ import annotations

# ── Combinators ──────────────────────────────────────────────────
from .combinators import (
    CombinedValidator,
    SyncCombinedValidator,
    combine,
    combine_async,
)

# ── Errors ───────────────────────────────────────────────────────
from .exceptions import (
    AsyncValidatorsError,
    InvalidResultError,
    InvalidValidatorsError,
    ValidationError,
)
from .guard import ensure_valid
from .outcome import Deferred, Immediate, classify, resolve_messages

# ── Ports ────────────────────────────────────────────────────────
from .ports import IValidator, Messages, ValidatorResult

# ── Validators ───────────────────────────────────────────────────
from .validators import (
    DEFAULT_EQUAL_MESSAGE,
    DEFAULT_MATCH_MESSAGE,
    equal_to,
    matches,
    model_validator,
)

__all__ = [
    "AsyncValidatorsError",
    "CombinedValidator",
    "DEFAULT_EQUAL_MESSAGE",
    "DEFAULT_MATCH_MESSAGE",
    "Deferred",
    "IValidator",
    "Immediate",
    "InvalidResultError",
    "InvalidValidatorsError",
    "Messages",
    "SyncCombinedValidator",
    "ValidationError",
    "ValidatorResult",
    "classify",
    "combine",
    "combine_async",
    "ensure_valid",
    "equal_to",
    "matches",
    "model_validator",
    "resolve_messages",
]
