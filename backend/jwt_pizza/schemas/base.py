"""Shared schema base — camelCase wire names, snake_case attributes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """JSON-ready dict as the transport layer sends it (aliases, no None fields)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
