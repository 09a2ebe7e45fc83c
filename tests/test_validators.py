from __future__ import annotations

import re

import pytest
from pydantic import BaseModel, Field

from async_validators.validators import (
    DEFAULT_EQUAL_MESSAGE,
    DEFAULT_MATCH_MESSAGE,
    equal_to,
    matches,
    model_validator,
)

# --- equal_to ---


def test_equal_to_fixed_value() -> None:
    assert equal_to(5)(5) == []
    assert equal_to(5)("5") == ["Values are not equal"]
    assert equal_to(5, "nope")(6) == ["nope"]


def test_equal_to_does_not_equate_bools_and_numbers() -> None:
    assert equal_to(1)(True) == [DEFAULT_EQUAL_MESSAGE]
    assert equal_to(0)(False) == [DEFAULT_EQUAL_MESSAGE]
    assert equal_to(True)(1) == [DEFAULT_EQUAL_MESSAGE]
    assert equal_to(True)(True) == []
    assert equal_to(1)(1.0) == []


def test_equal_to_supplier_is_called_each_time() -> None:
    state = {"password": "secret"}
    confirm = equal_to(lambda: state["password"])

    assert confirm("secret") == []
    state["password"] = "changed"
    assert confirm("secret") == [DEFAULT_EQUAL_MESSAGE]


def test_equal_to_nan_never_equal() -> None:
    assert equal_to(float("nan"))(float("nan")) == [DEFAULT_EQUAL_MESSAGE]


# --- matches ---


def test_matches_string_pattern() -> None:
    starts_with_a = matches("^a")

    assert starts_with_a("abc") == []
    assert starts_with_a("bcd") == ["Value doesnt match pattern"]


def test_matches_is_unanchored_search() -> None:
    assert matches("b")("abc") == []


def test_matches_coerces_value_to_string() -> None:
    digits = matches(r"^\d+$", "digits only")

    assert digits(1234) == []
    assert digits(None) == ["digits only"]


def test_matches_compiled_pattern_and_flags() -> None:
    assert matches(re.compile("^A", re.IGNORECASE))("abc") == []
    assert matches("^A", flags=re.IGNORECASE)("abc") == []
    assert matches("^A")("abc") == [DEFAULT_MATCH_MESSAGE]


def test_matches_rejects_flags_with_compiled_pattern() -> None:
    with pytest.raises(ValueError):
        matches(re.compile("a"), flags=re.IGNORECASE)


def test_matches_invalid_pattern_fails_at_construction() -> None:
    with pytest.raises(re.error):
        matches("(")


# --- model_validator ---


class Address(BaseModel):
    street: str
    zip: str = Field(..., max_length=5)


class Person(BaseModel):
    name: str = Field(..., min_length=3)
    address: Address


def test_model_validator_success() -> None:
    validate = model_validator(Person)

    assert validate({"name": "Alice", "address": {"street": "Main", "zip": "12345"}}) == []


def test_model_validator_reports_each_error_with_location() -> None:
    validate = model_validator(Person)

    messages = validate({"name": "Al", "address": {"street": "Main", "zip": "123456"}})

    assert len(messages) == 2
    assert messages[0].startswith("name: ")
    assert messages[1].startswith("address.zip: ")


def test_model_validator_without_location() -> None:
    validate = model_validator(Person, include_location=False)

    messages = validate({"name": "Al", "address": {"street": "Main", "zip": "123"}})

    assert messages == ["String should have at least 3 characters"]


def test_model_validator_root_errors_have_no_location() -> None:
    validate = model_validator(int)

    assert validate("12") == []
    assert validate("not a number") == [
        "Input should be a valid integer, unable to parse string as an integer"
    ]
