# This file provides a fluent builder for user request payloads.
# Callers chain `with_*` setters and call `build()` to get the JSON body as a string.
# Serialization is delegated to the pydantic model so escaping rules live in one place.

from __future__ import annotations

from src.api.schemas.user_schemas import UserPayload

DEFAULT_NAME = "John Doe"
DEFAULT_EMAIL = "john@example.com"


class UserPayloadBuilder:
    """Accumulates user fields and serializes them to a JSON object string."""

    def __init__(self) -> None:
        self.name = DEFAULT_NAME
        self.email = DEFAULT_EMAIL

    def with_name(self, name: str) -> UserPayloadBuilder:
        self.name = name
        return self

    def with_email(self, email: str) -> UserPayloadBuilder:
        self.email = email
        return self

    def build(self) -> str:
        return UserPayload(name=self.name, email=self.email).model_dump_json()
