from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input and serializes with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, from_attributes=True)
