"""Pydantic models for vote request/response."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VoteRequest(BaseModel):
    """Validation model for a vote request.

    `type` is only type-checked here and is passed through verbatim;
    ComboService decides which values are valid votes.
    """

    model_config = ConfigDict(populate_by_name=True)

    combo_id: str = Field(..., min_length=1, description="Combo ID from the path")
    vote_type: str | None = Field(None, alias="type", description="Either 'bite' or 'ban'")

    @field_validator("combo_id", mode="before")
    @classmethod
    def strip_combo_id(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class VoteResponse(BaseModel):
    """Response model for a recorded vote."""

    message: str = Field(..., description="Success message")
    result: dict[str, Any] = Field(..., description="Outcome of the counter update")
