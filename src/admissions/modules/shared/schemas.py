"""Shared response schema base."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResponseSchema(BaseModel):
    """Serialized from ORM objects, emitted with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
