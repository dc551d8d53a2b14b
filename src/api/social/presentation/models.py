"""Shared pydantic configuration for social API models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing with camelCase keys.

    Accepts both camelCase and snake_case on input. FastAPI serializes
    response models by alias, so responses are camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
