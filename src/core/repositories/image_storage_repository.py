"""Abstract contract for image file storage."""

from abc import ABC, abstractmethod

from core.models.image import StoredImage


class ImageStorageRepository(ABC):
    """Contract for storing and removing combo images.

    Implementations could be S3, GCS, Cloudinary, local disk, etc.
    The service depends on this interface, not the implementation.
    """

    @abstractmethod
    def upload_image(
        self,
        *,
        folder: str,
        field_name: str,
        file_data: bytes,
    ) -> StoredImage:
        """Upload image bytes and return where they can be fetched.

        Args:
            folder: Logical folder the object is stored under
            field_name: Form field the image came from, used in the object name
            file_data: Binary image content

        Returns:
            StoredImage with a public URL and a storage key

        Raises:
            ImageStorageError: If upload fails
        """

    @abstractmethod
    def remove_image(self, *, key: str) -> None:
        """Delete image by key.

        Args:
            key: Storage key from upload

        Raises:
            ImageStorageError: If deletion fails
        """
