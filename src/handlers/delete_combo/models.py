"""Pydantic models for delete combo request/response."""

from pydantic import BaseModel, ConfigDict, Field


class DeleteComboRequest(BaseModel):
    """Validation model for delete combo request."""

    model_config = ConfigDict(str_strip_whitespace=True)
    combo_id: str = Field(
        ...,
        min_length=1,
        description="Combo ID to delete",
    )


class DeleteComboResponse(BaseModel):
    """Response model for a delete request."""

    id: str = Field(..., description="Requested combo ID")
    message: str = Field(..., description="Success message")
