"""S3-backed implementation of ImageStorageRepository."""

import uuid

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import ImageStorageError
from core.models.image import StoredImage
from core.repositories.image_storage_repository import ImageStorageRepository
from core.utils.constants import (
    ERROR_CODE_IMAGE_DELETE_FAILED,
    ERROR_CODE_IMAGE_UPLOAD_FAILED,
    MIME_TYPE_EXTENSION_MAP,
)
from core.utils.mime import detect_mime_type
from core.utils.time import utc_now_millis

logger = Logger(UTC=True)


class S3ImageStorage(ImageStorageRepository):
    """Image storage implementation backed by Amazon S3."""

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    def upload_image(
        self,
        *,
        folder: str,
        field_name: str,
        file_data: bytes,
    ) -> StoredImage:
        """Upload image bytes to S3 and return the public URL and object key."""
        mime_type = detect_mime_type(file_data)
        key = self.build_key(folder=folder, field_name=field_name, mime_type=mime_type)

        logger.debug(
            "Uploading image",
            extra={
                "field_name": field_name,
                "key": key,
                "size": len(file_data),
            },
        )

        try:
            self._s3.put_object(
                key=key,
                body=file_data,
                content_type=mime_type,
                metadata={"field_name": field_name},
            )
            url = self._s3.public_url(key=key)
            logger.info("Image uploaded successfully", extra={"key": key})
            return StoredImage(url=url, key=key, content_type=mime_type)

        except ClientError as exc:
            logger.error("S3 upload failed", extra={"key": key})
            raise ImageStorageError(
                message="Unable to upload image at this time",
                error_code=ERROR_CODE_IMAGE_UPLOAD_FAILED,
                details={"field_name": field_name},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading image")
            raise ImageStorageError(
                message="Unable to upload image at this time",
                error_code=ERROR_CODE_IMAGE_UPLOAD_FAILED,
                details={"field_name": field_name},
            ) from exc

    def remove_image(self, *, key: str) -> None:
        """Delete an image object from S3."""
        logger.debug("Deleting image", extra={"key": key})

        try:
            self._s3.delete_object(key=key)
            logger.info("Image deleted successfully", extra={"key": key})

        except ClientError as exc:
            logger.error("S3 deletion failed", extra={"key": key})
            raise ImageStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_IMAGE_DELETE_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting image")
            raise ImageStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_IMAGE_DELETE_FAILED,
                details={"key": key},
            ) from exc

    @staticmethod
    def build_key(*, folder: str, field_name: str, mime_type: str) -> str:
        """Return a collision-free object key: folder/field-millis-token.ext."""
        extension = MIME_TYPE_EXTENSION_MAP.get(mime_type, "bin")
        timestamp_ms = utc_now_millis()
        token = uuid.uuid4().hex[:8]
        return f"{folder}/{field_name}-{timestamp_ms}-{token}.{extension}"
