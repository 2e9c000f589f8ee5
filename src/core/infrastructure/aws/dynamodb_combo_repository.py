"""DynamoDB-backed implementation of ComboRepository."""

import uuid
from collections.abc import Iterator
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.combo import Combo, NewCombo, RemovedCombo, VoteResult, VoteType
from core.models.errors import StoreError
from core.repositories.combo_repository import ComboRepository
from core.utils.constants import (
    COMBO_ID_PREFIX,
    ERROR_CODE_COMBO_COUNT_FAILED,
    ERROR_CODE_COMBO_CREATE_FAILED,
    ERROR_CODE_COMBO_DELETE_FAILED,
    ERROR_CODE_COMBO_FETCH_FAILED,
    ERROR_CODE_COMBO_LIST_FAILED,
    ERROR_CODE_COMBO_VOTE_FAILED,
)
from core.utils.time import utc_now_iso

Item = dict[str, Any]

logger = Logger(UTC=True)


class DynamoDBComboRepository(ComboRepository):
    """DynamoDB-backed combo storage with error handling.

    All boto3 errors are caught and translated into
    StoreError with stable error codes.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    @staticmethod
    def generate_combo_id() -> str:
        """Generate a unique combo identifier."""
        return f"{COMBO_ID_PREFIX}{uuid.uuid4().hex}"

    def insert(self, *, combo: NewCombo) -> Combo:
        """Persist a new combo with zeroed counters.

        Raises:
            StoreError: If the write fails
        """
        combo_id = self.generate_combo_id()

        item: Item = {
            "combo_id": combo_id,
            "item_a": combo.item_a,
            "item_b": combo.item_b,
            "image_a": combo.image_a,
            "image_b": combo.image_b,
            "bite": 0,
            "ban": 0,
            "created_at": utc_now_iso(),
        }
        if combo.image_a_key:
            item["image_a_key"] = combo.image_a_key
        if combo.image_b_key:
            item["image_b_key"] = combo.image_b_key

        logger.debug("Inserting combo", extra={"combo_id": combo_id})

        try:
            self._db.put_item(
                item=item,
                condition_expression="attribute_not_exists(combo_id)",  # Partition key
            )
            logger.info("Combo inserted", extra={"combo_id": combo_id})

        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"combo_id": combo_id})
            raise StoreError(
                message="Unable to save combo at this time",
                error_code=ERROR_CODE_COMBO_CREATE_FAILED,
                details={"combo_id": combo_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error inserting combo")
            raise StoreError(
                message="Unable to save combo at this time",
                error_code=ERROR_CODE_COMBO_CREATE_FAILED,
                details={"combo_id": combo_id},
            ) from exc

        return Combo(
            combo_id=combo_id,
            item_a=combo.item_a,
            item_b=combo.item_b,
            image_a=combo.image_a,
            image_b=combo.image_b,
            bite=0,
            ban=0,
            image_a_key=combo.image_a_key,
            image_b_key=combo.image_b_key,
            created_at=item["created_at"],
        )

    def list_all(self) -> list[Combo]:
        """Scan the whole table, following pagination.

        Malformed items are skipped with a warning.
        """
        logger.debug("Listing all combos")

        combos: list[Combo] = []

        try:
            for page_items in self._scan_pages():
                for item in page_items:
                    combo = self._to_combo(item)
                    if combo is not None:
                        combos.append(combo)

        except ClientError as exc:
            logger.error("DynamoDB scan failed")
            raise StoreError(
                message="Unable to list combos",
                error_code=ERROR_CODE_COMBO_LIST_FAILED,
            ) from exc

        except StoreError:
            raise

        except Exception as exc:
            logger.exception("Unexpected error listing combos")
            raise StoreError(
                message="Unable to list combos",
                error_code=ERROR_CODE_COMBO_LIST_FAILED,
            ) from exc

        logger.info("Combos listed", extra={"count": len(combos)})
        return combos

    def count(self) -> int:
        """Count items with a paginated COUNT scan.

        NOTE:
        - Every stored item is counted, including malformed ones that
          `list_all` skips. The count matches the positions `fetch_at`
          walks, not the length of `list_all`.
        """
        total = 0
        scan_kwargs: dict[str, Any] = {"Select": "COUNT"}

        try:
            while True:
                response = self._db.scan(**scan_kwargs)
                total += int(response.get("Count", 0))

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except ClientError as exc:
            logger.error("DynamoDB count scan failed")
            raise StoreError(
                message="Unable to count combos",
                error_code=ERROR_CODE_COMBO_COUNT_FAILED,
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error counting combos")
            raise StoreError(
                message="Unable to count combos",
                error_code=ERROR_CODE_COMBO_COUNT_FAILED,
            ) from exc

        logger.debug("Combos counted", extra={"count": total})
        return total

    def fetch_at(self, *, offset: int) -> Combo | None:
        """Walk scan pages until the item at `offset` is reached.

        NOTE:
        - Returns None when offset is negative or past the end.
        - A malformed item at the offset also yields None, so a random pick
          landing on one reports "no combo" even when valid combos exist.
          Offsets are raw item positions, the same ones `count` counts.
        """
        logger.debug("Fetching combo at offset", extra={"offset": offset})

        if offset < 0:
            return None

        skipped = 0

        try:
            for page_items in self._scan_pages():
                if offset < skipped + len(page_items):
                    return self._to_combo(page_items[offset - skipped])
                skipped += len(page_items)

        except ClientError as exc:
            logger.error("DynamoDB scan failed", extra={"offset": offset})
            raise StoreError(
                message="Unable to retrieve combo",
                error_code=ERROR_CODE_COMBO_FETCH_FAILED,
                details={"offset": offset},
            ) from exc

        except StoreError:
            raise

        except Exception as exc:
            logger.exception("Unexpected error fetching combo")
            raise StoreError(
                message="Unable to retrieve combo",
                error_code=ERROR_CODE_COMBO_FETCH_FAILED,
                details={"offset": offset},
            ) from exc

        logger.debug("Offset past end of table", extra={"offset": offset, "count": skipped})
        return None

    def increment_vote(self, *, combo_id: str, field: VoteType) -> VoteResult:
        """Atomically increment a counter with an ADD update expression.

        The update is conditional on the combo existing, so a vote for a
        missing id never creates a partial record.
        """
        logger.debug("Incrementing vote", extra={"combo_id": combo_id, "field": field})

        try:
            response = self._db.update_item(
                Key={"combo_id": combo_id},
                UpdateExpression="ADD #vote :one",
                ConditionExpression="attribute_exists(combo_id)",
                ExpressionAttributeNames={"#vote": field},
                ExpressionAttributeValues={":one": 1},
                ReturnValues="ALL_NEW",
            )

        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                logger.warning("Vote matched no combo", extra={"combo_id": combo_id})
                return VoteResult(combo_id=combo_id, vote_type=field, matched=False)

            logger.error("DynamoDB update_item failed", extra={"combo_id": combo_id})
            raise StoreError(
                message="Unable to record vote",
                error_code=ERROR_CODE_COMBO_VOTE_FAILED,
                details={"combo_id": combo_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error recording vote")
            raise StoreError(
                message="Unable to record vote",
                error_code=ERROR_CODE_COMBO_VOTE_FAILED,
                details={"combo_id": combo_id},
            ) from exc

        attributes = response.get("Attributes") or {}
        logger.info("Vote recorded", extra={"combo_id": combo_id, "field": field})

        return VoteResult(
            combo_id=combo_id,
            vote_type=field,
            matched=True,
            bite=int(attributes.get("bite", 0)),
            ban=int(attributes.get("ban", 0)),
        )

    def delete_by_id(self, *, combo_id: str) -> RemovedCombo | None:
        """Delete a combo and return its id and image keys, if it existed.

        Keys come from the raw deleted item, so a malformed record still
        yields its images for cleanup.
        """
        logger.debug("Deleting combo", extra={"combo_id": combo_id})

        try:
            response = self._db.delete_item(
                key={"combo_id": combo_id},
                return_values="ALL_OLD",
            )

        except ClientError as exc:
            logger.error("DynamoDB delete_item failed", extra={"combo_id": combo_id})
            raise StoreError(
                message="Unable to delete combo",
                error_code=ERROR_CODE_COMBO_DELETE_FAILED,
                details={"combo_id": combo_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting combo")
            raise StoreError(
                message="Unable to delete combo",
                error_code=ERROR_CODE_COMBO_DELETE_FAILED,
                details={"combo_id": combo_id},
            ) from exc

        old_item = response.get("Attributes")
        if not old_item:
            logger.info("Delete matched no combo", extra={"combo_id": combo_id})
            return None

        logger.info("Combo deleted", extra={"combo_id": combo_id})
        return RemovedCombo(
            combo_id=combo_id,
            image_a_key=self._string_or_none(old_item.get("image_a_key")),
            image_b_key=self._string_or_none(old_item.get("image_b_key")),
        )

    @staticmethod
    def _string_or_none(value: Any) -> str | None:
        return value if isinstance(value, str) and value else None

    def _scan_pages(self) -> Iterator[list[Item]]:
        """Yield the item list of each scan page until the table is exhausted."""
        scan_kwargs: dict[str, Any] = {}

        while True:
            response = self._db.scan(**scan_kwargs)
            page_items = response.get("Items", [])

            if not isinstance(page_items, list):
                raise StoreError(
                    message="Invalid scan response from DynamoDB",
                    error_code=ERROR_CODE_COMBO_LIST_FAILED,
                )

            yield page_items

            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                break
            scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

    @staticmethod
    def _to_combo(item: Item) -> Combo | None:
        """Convert a stored item into a Combo, or None if it is malformed."""
        try:
            return Combo(
                combo_id=item["combo_id"],
                item_a=item["item_a"],
                item_b=item["item_b"],
                image_a=item["image_a"],
                image_b=item["image_b"],
                bite=int(item.get("bite", 0)),
                ban=int(item.get("ban", 0)),
                image_a_key=item.get("image_a_key"),
                image_b_key=item.get("image_b_key"),
                created_at=item.get("created_at"),
            )
        except Exception as exc:
            logger.warning(
                "Skipping malformed combo item",
                extra={"combo_id": item.get("combo_id")},
                exc_info=exc,
            )
            return None
