# This file defines the user payload sent to user-facing API endpoints.
# It exists so request bodies built in tests and scripts share one serializer.
# The model has exactly two string fields and rejects unknown keys.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    email: str
