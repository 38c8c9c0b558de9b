"""
Pydantic schemas for special instruction endpoints.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import CamelModel


class SpecialInstructionRequest(CamelModel):
    instruction: str = Field(..., min_length=1, max_length=2000)


class SpecialInstructionResponse(CamelModel):
    id: str
    instruction: str

    @classmethod
    def from_row(cls, row: dict) -> "SpecialInstructionResponse":
        return cls(id=str(row["special_instruction_id"]), instruction=str(row["instruction"]))
