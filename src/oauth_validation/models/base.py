"""Base class for the serialized OAuth API objects.

Python attributes are snake_case; the wire form is camelCase. Field error
paths always use the wire names.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Frozen model that loads from and dumps to its camelCase wire form."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> Self:
        """Build the model from a wire dict. Does not mutate ``data``."""
        return cls.model_validate(data)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
