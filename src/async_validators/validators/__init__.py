"""Leaf validators: each factory returns a plain ``value -> list[str]`` callable."""

from __future__ import annotations

from .equal_to import DEFAULT_EQUAL_MESSAGE, equal_to
from .matches import DEFAULT_MATCH_MESSAGE, matches
from .pydantic import model_validator

__all__ = [
    "DEFAULT_EQUAL_MESSAGE",
    "DEFAULT_MATCH_MESSAGE",
    "equal_to",
    "matches",
    "model_validator",
]
