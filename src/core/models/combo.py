"""Combo domain models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, StrictBool, StrictStr

VoteType = Literal["bite", "ban"]


class NewCombo(BaseModel):
    """Validated combo fields ready to be persisted."""

    item_a: StrictStr = Field(..., min_length=1, description="First food item label")
    item_b: StrictStr = Field(..., min_length=1, description="Second food item label")

    image_a: StrictStr = Field(..., min_length=1, description="Public URL of the first item image")
    image_b: StrictStr = Field(..., min_length=1, description="Public URL of the second item image")

    image_a_key: StrictStr | None = Field(None, description="Storage key of the first image")
    image_b_key: StrictStr | None = Field(None, description="Storage key of the second image")


class Combo(BaseModel):
    """A persisted combo of two food items and their vote counters.

    Serializes with the public field names (`id`, `itemA`, ...) when dumped
    with `by_alias=True`.
    """

    model_config = ConfigDict(populate_by_name=True)

    combo_id: StrictStr = Field(..., alias="id", description="Unique combo identifier")
    item_a: StrictStr = Field(..., alias="itemA")
    item_b: StrictStr = Field(..., alias="itemB")
    image_a: StrictStr = Field(..., alias="imageA")
    image_b: StrictStr = Field(..., alias="imageB")
    bite: NonNegativeInt = Field(0, description="Number of bite votes")
    ban: NonNegativeInt = Field(0, description="Number of ban votes")

    image_a_key: StrictStr | None = Field(None, exclude=True)
    image_b_key: StrictStr | None = Field(None, exclude=True)
    created_at: StrictStr | None = Field(None, exclude=True)

    def to_public(self) -> dict[str, object]:
        """Return the serialized form exposed by the API."""
        return self.model_dump(by_alias=True)


class VoteResult(BaseModel):
    """Outcome of a single vote increment."""

    combo_id: StrictStr
    vote_type: VoteType
    matched: StrictBool = Field(..., description="Whether a combo with this id existed")
    bite: NonNegativeInt | None = None
    ban: NonNegativeInt | None = None


class RemovedCombo(BaseModel):
    """Identity and image keys of a deleted combo record.

    Built from the raw deleted item, so it is available even when the
    rest of the record no longer parses as a Combo.
    """

    combo_id: StrictStr
    image_a_key: StrictStr | None = None
    image_b_key: StrictStr | None = None
