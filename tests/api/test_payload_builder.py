# This test file validates the fluent user payload builder.
# It exists so request bodies used by API tests keep exactly the two agreed keys.
# The checks cover defaults, chaining, ordering, and characters that need escaping.

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from src.api.payload_builder import UserPayloadBuilder


def test_default_build_uses_default_user() -> None:
    payload = json.loads(UserPayloadBuilder().build())

    assert payload == {"name": "John Doe", "email": "john@example.com"}


def test_setters_return_same_builder() -> None:
    builder = UserPayloadBuilder()

    assert builder.with_name("Jane") is builder
    assert builder.with_email("jane@example.com") is builder


@pytest.mark.parametrize(
    ("name", "email"),
    [
        ("Jane Roe", "jane@example.com"),
        ("", ""),
        ('Quote "Q" \\ Backslash', "tab\tand\nnewline@example.com"),
        ("Zoë Ångström", "zoë@example.com"),
    ],
)
def test_build_parses_back_to_set_values(name: str, email: str) -> None:
    raw = UserPayloadBuilder().with_name(name).with_email(email).build()

    assert json.loads(raw) == {"name": name, "email": email}


def test_setter_order_does_not_change_output() -> None:
    first = UserPayloadBuilder().with_name("Jane").with_email("jane@example.com").build()
    second = UserPayloadBuilder().with_email("jane@example.com").with_name("Jane").build()

    assert first == second


def test_latest_value_wins() -> None:
    raw = UserPayloadBuilder().with_name("First").with_name("Second").build()

    assert json.loads(raw)["name"] == "Second"


def test_build_does_not_reset_builder_state() -> None:
    builder = UserPayloadBuilder().with_email("kept@example.com")
    builder.build()

    assert json.loads(builder.build())["email"] == "kept@example.com"


def test_non_string_value_is_rejected_by_serializer() -> None:
    builder = UserPayloadBuilder().with_name(42)  # type: ignore[arg-type]

    with pytest.raises(ValidationError):
        builder.build()
