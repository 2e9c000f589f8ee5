"""Thin adapter for interacting with Amazon S3."""

from collections.abc import Mapping
import os
from typing import Any, Protocol

import boto3

from core.utils.constants import (
    DEFAULT_AWS_REGION,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_COMBO_IMAGE_BUCKET_NAME,
    ENV_IMAGE_PUBLIC_BASE_URL,
)


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
        Metadata: Mapping[str, str],
    ) -> Any: ...

    def delete_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Any: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None: ...

    def delete_object(self, *, key: str) -> None: ...

    def public_url(self, *, key: str) -> str: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self) -> None:
        """Create S3 client from environment configuration."""
        bucket_name = os.getenv(ENV_COMBO_IMAGE_BUCKET_NAME)
        if not bucket_name:
            raise RuntimeError(f"{ENV_COMBO_IMAGE_BUCKET_NAME} environment variable is not set")

        self._bucket = bucket_name
        self._endpoint_url = os.getenv(ENV_AWS_ENDPOINT_URL)
        self._region = os.getenv(ENV_AWS_REGION, DEFAULT_AWS_REGION)
        self._public_base_url = os.getenv(ENV_IMAGE_PUBLIC_BASE_URL)
        self._client: _Boto3S3Client = boto3.client(
            "s3",
            endpoint_url=self._endpoint_url,
            region_name=self._region,
        )

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            Metadata=metadata,
        )

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.delete_object(
            Bucket=self._bucket,
            Key=key,
        )

    def public_url(self, *, key: str) -> str:
        """Build the public URL of an object.

        Precedence: explicit public base URL, then the custom endpoint
        (path-style, e.g. LocalStack), then the virtual-hosted AWS URL.
        """
        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{key}"

        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket}/{key}"

        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"
