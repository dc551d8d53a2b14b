"""Pydantic models for the authentication API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthenticationRequest(BaseModel):
    """Credentials exchanged for a bearer token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_name: str = Field(..., min_length=1, max_length=80)
    password: str = Field(..., min_length=1)
