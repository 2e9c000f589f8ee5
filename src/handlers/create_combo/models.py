"""Pydantic models for combo creation request/response."""

import base64
import binascii

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = Logger(UTC=True)


class CreateComboRequest(BaseModel):
    """Validation model for the create combo request.

    Every field is optional at this layer. Presence of all four is a
    business rule checked by ComboService so that a missing field always
    yields the same "Missing fields or images" error.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    item_a: str | None = Field(None, alias="itemA", description="First food item")
    item_b: str | None = Field(None, alias="itemB", description="Second food item")
    image_a: str | None = Field(None, alias="imageA", description="Base64 encoded image of itemA")
    image_b: str | None = Field(None, alias="imageB", description="Base64 encoded image of itemB")

    @field_validator("image_a", "image_b")
    @classmethod
    def validate_image(cls, value: str | None) -> str | None:
        """Reject images that are present but not valid base64."""
        if not value:
            return None

        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"Image validation error: Invalid base64 - {e}")
            raise ValueError("Invalid base64 encoded image") from e

        return value


class CreateComboResponse(BaseModel):
    """Response model for successful combo creation."""

    id: str = Field(..., description="Assigned combo ID")
    message: str = Field(..., description="Success message")
