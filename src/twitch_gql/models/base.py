"""Base class for models decoded from GraphQL responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class WireModel(BaseModel):
    """Response model that reads an explicit ``null`` as "use the default".

    Most Twitch GraphQL fields are nullable; a null count or title decodes to
    the field default instead of failing the whole page.
    """

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
