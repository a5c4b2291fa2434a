"""Base pydantic model for the camelCase JSON documents exchanged with Alexa."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model whose fields serialize under camelCase aliases.

    Fields are declared in snake_case and accepted by either name. Optional
    fields left as ``None`` are omitted from the output, matching what the
    Alexa schemas expect for absent values.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class FrozenCamelModel(CamelModel):
    """Immutable variant used for built artifacts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
