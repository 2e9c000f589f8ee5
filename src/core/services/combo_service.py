"""Business logic for combo creation, voting, random selection and deletion.

This module coordinates input validation, image uploads and combo
persistence while translating infrastructure failures into ServerError.
"""

import base64
import binascii
import random

from aws_lambda_powertools import Logger

from core.models.combo import Combo, NewCombo, VoteResult, VoteType
from core.models.errors import ImageStorageError, ServerError, StoreError, ValidationError
from core.models.image import StoredImage
from core.repositories.combo_repository import ComboRepository
from core.repositories.image_storage_repository import ImageStorageRepository
from core.utils.constants import (
    DEFAULT_IMAGE_FOLDER,
    ERROR_CODE_INVALID_VOTE_TYPE,
    ERROR_CODE_MISSING_FIELDS,
    IMAGE_FIELD_A,
    IMAGE_FIELD_B,
    MESSAGE_DELETE_FAILED,
    MESSAGE_INVALID_VOTE_TYPE,
    MESSAGE_MISSING_FIELDS,
    MESSAGE_SERVER_ERROR,
    VOTE_TYPES,
)

logger = Logger(UTC=True)


class ComboService:
    """Application service responsible for the combo lifecycle.

    This service orchestrates:
    - Validation of create and vote input
    - Uploading both combo images, then persisting the combo
    - Compensating image cleanup when creation fails part-way
    - Count-then-offset random selection
    - Idempotent deletion

    The repository and image storage are injected so the same service runs
    against DynamoDB/S3 in Lambda and against substitutes in tests.
    """

    def __init__(
        self,
        *,
        repository: ComboRepository,
        storage: ImageStorageRepository,
        image_folder: str = DEFAULT_IMAGE_FOLDER,
        rng: random.Random | None = None,
    ) -> None:
        self.repository = repository
        self.storage = storage
        self.image_folder = image_folder
        self._rng = rng or random.Random()

    @staticmethod
    def decode_image(encoded: str) -> bytes:
        """Decode base64-encoded image data.

        Raises:
            ValidationError: If decoding fails
        """
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            logger.warning("Failed to decode base64 image data")
            raise ValidationError(
                message="Invalid image data",
                details={"encoding": "base64"},
            ) from exc

    def create_combo(
        self,
        *,
        item_a: str | None,
        item_b: str | None,
        image_a: bytes | None,
        image_b: bytes | None,
    ) -> Combo:
        """Upload both images and persist a new combo.

        The creation flow is:
        1. Check all four inputs are present
        2. Upload image A, then image B
        3. Persist the combo with both URLs
        4. Remove uploaded images if a later step fails

        Raises:
            ValidationError: If a label or image is missing
            ServerError: If an upload or the insert fails
        """
        label_a = (item_a or "").strip()
        label_b = (item_b or "").strip()

        if not label_a or not label_b or not image_a or not image_b:
            logger.warning(
                "Combo creation rejected",
                extra={
                    "has_item_a": bool(label_a),
                    "has_item_b": bool(label_b),
                    "has_image_a": bool(image_a),
                    "has_image_b": bool(image_b),
                },
            )
            raise ValidationError(
                message=MESSAGE_MISSING_FIELDS,
                error_code=ERROR_CODE_MISSING_FIELDS,
            )

        logger.debug("Starting combo creation", extra={"item_a": label_a, "item_b": label_b})

        uploaded: list[StoredImage] = []

        try:
            for field_name, file_data in ((IMAGE_FIELD_A, image_a), (IMAGE_FIELD_B, image_b)):
                uploaded.append(
                    self.storage.upload_image(
                        folder=self.image_folder,
                        field_name=field_name,
                        file_data=file_data,
                    )
                )

            stored_a, stored_b = uploaded
            combo = self.repository.insert(
                combo=NewCombo(
                    item_a=label_a,
                    item_b=label_b,
                    image_a=stored_a.url,
                    image_b=stored_b.url,
                    image_a_key=stored_a.key,
                    image_b_key=stored_b.key,
                )
            )

        except Exception as exc:
            logger.exception(
                "Combo creation failed",
                extra={"uploaded": len(uploaded), "error": str(exc)},
            )
            self._remove_images([image.key for image in uploaded])
            raise ServerError(message=MESSAGE_SERVER_ERROR) from exc

        logger.info("Combo created successfully", extra={"combo_id": combo.combo_id})
        return combo

    def list_combos(self) -> list[Combo]:
        """Return every combo currently stored."""
        try:
            return self.repository.list_all()
        except StoreError as exc:
            logger.exception("Failed to list combos")
            raise ServerError(message=MESSAGE_SERVER_ERROR) from exc

    def random_combo(self) -> Combo | None:
        """Pick one combo uniformly at random.

        Uses count-then-offset. The table can change between the two calls,
        so a None from the offset fetch means "no combo available", same
        as an empty table.
        """
        try:
            total = self.repository.count()

            if total == 0:
                logger.info("No combos available for random selection")
                return None

            offset = self._rng.randrange(total)
            combo = self.repository.fetch_at(offset=offset)

        except StoreError as exc:
            logger.exception("Failed to fetch random combo")
            raise ServerError(message=MESSAGE_SERVER_ERROR) from exc

        if combo is None:
            logger.warning(
                "Random offset no longer present",
                extra={"offset": offset, "count": total},
            )

        return combo

    def vote(self, *, combo_id: str, vote_type: str | None) -> VoteResult:
        """Record a bite or ban vote.

        A vote for an id that matches nothing is reported with
        `matched=False`, never as an error.

        Raises:
            ValidationError: If vote_type is not "bite" or "ban"
            ServerError: If the store update fails
        """
        if not isinstance(vote_type, str) or vote_type not in VOTE_TYPES:
            logger.warning(
                "Invalid vote type",
                extra={"combo_id": combo_id, "vote_type": vote_type},
            )
            raise ValidationError(
                message=MESSAGE_INVALID_VOTE_TYPE,
                error_code=ERROR_CODE_INVALID_VOTE_TYPE,
                details={"allowed": sorted(VOTE_TYPES)},
            )

        field: VoteType = "bite" if vote_type == "bite" else "ban"

        try:
            return self.repository.increment_vote(combo_id=combo_id, field=field)
        except StoreError as exc:
            logger.exception("Failed to record vote", extra={"combo_id": combo_id})
            raise ServerError(message=MESSAGE_SERVER_ERROR) from exc

    def delete_combo(self, *, combo_id: str) -> None:
        """Delete a combo and, if it existed, its stored images.

        Deleting an id that does not exist succeeds.

        Raises:
            ServerError: If the store deletion fails
        """
        try:
            removed = self.repository.delete_by_id(combo_id=combo_id)
        except StoreError as exc:
            logger.exception("Failed to delete combo", extra={"combo_id": combo_id})
            raise ServerError(message=MESSAGE_DELETE_FAILED) from exc

        if removed is not None:
            self._remove_images([removed.image_a_key, removed.image_b_key])

    def _remove_images(self, keys: list[str | None]) -> None:
        """Best-effort removal of stored images; failures are only logged."""
        for key in keys:
            if not key:
                continue
            try:
                self.storage.remove_image(key=key)
            except ImageStorageError:
                logger.warning("Failed to clean up combo image", extra={"key": key})
