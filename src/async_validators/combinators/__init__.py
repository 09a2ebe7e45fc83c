"""Combinators: compose several validators into one."""

from __future__ import annotations

from .combine import SyncCombinedValidator, combine
from .combine_async import CombinedValidator, combine_async

__all__ = [
    "CombinedValidator",
    "SyncCombinedValidator",
    "combine",
    "combine_async",
]
