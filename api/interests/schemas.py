"""
Pydantic schemas for interest records and endpoint payloads.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InterestFields(BaseModel):
    """
    The five content fields a client submits on create/update.

    Omitted fields fall back to empty/zero so a stored record is never partial.
    """

    textbox1: str = ""
    textbox2: str = ""
    textbox3: float = Field(default=0.0, allow_inf_nan=False)
    textbox4: float = Field(default=0.0, allow_inf_nan=False)
    textbox5: str = ""

    @field_validator("textbox3", "textbox4", mode="before")
    @classmethod
    def _blank_number_is_zero(cls, value: Any) -> Any:
        # Empty number inputs arrive as "".
        if isinstance(value, str) and not value.strip():
            return 0.0
        return value


class Interest(InterestFields):
    model_config = ConfigDict(frozen=True)

    id: int
    created_at: str


class InterestSummary(BaseModel):
    sumTextbox3: float
    sumTextbox4: float
    difference: float


class InterestListData(BaseModel):
    interests: list[Interest]
    summary: InterestSummary


class InterestIdData(BaseModel):
    id: int


class ListInterestsResponse(BaseModel):
    success: bool = True
    data: InterestListData


class InterestResponse(BaseModel):
    success: bool = True
    data: Interest


class InterestIdResponse(BaseModel):
    success: bool = True
    data: InterestIdData


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
