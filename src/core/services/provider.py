"""Process-wide ComboService construction.

Lambda reuses an execution environment across invocations, so the boto3
clients behind the service are built once and shared by every request.
"""

import os
from functools import lru_cache

from core.infrastructure.aws.dynamodb_combo_repository import DynamoDBComboRepository
from core.infrastructure.aws.s3_image_storage import S3ImageStorage
from core.services.combo_service import ComboService
from core.utils.constants import DEFAULT_IMAGE_FOLDER, ENV_COMBO_IMAGE_FOLDER


@lru_cache(maxsize=1)
def get_combo_service() -> ComboService:
    """Return the shared ComboService, building it on first use."""
    return ComboService(
        repository=DynamoDBComboRepository(),
        storage=S3ImageStorage(),
        image_folder=os.getenv(ENV_COMBO_IMAGE_FOLDER) or DEFAULT_IMAGE_FOLDER,
    )
