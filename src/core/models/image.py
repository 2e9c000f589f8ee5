"""Stored image model."""

from pydantic import BaseModel, Field, StrictStr


class StoredImage(BaseModel):
    """Result of uploading an image to object storage."""

    url: StrictStr = Field(..., description="Durable, publicly fetchable URL")
    key: StrictStr = Field(..., description="Storage key, used to delete the object")
    content_type: StrictStr = Field(..., description="Content type recorded on the object")
