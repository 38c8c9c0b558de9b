"""
Base pydantic model for the JSON wire format (camelCase keys).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        """
        Fields the client actually sent, keyed by column name (snake_case).
        """
        return self.model_dump(exclude_unset=True, exclude=exclude)
