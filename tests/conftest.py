"""
Pytest configuration and fixtures for food-combo tests.
Provides AWS mocking, DynamoDB and S3 fixtures with proper cleanup.
"""

import base64
import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ["AWS_REGION"] = "us-east-1"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ["COMBO_TABLE_NAME"] = "food-combos-test"
os.environ["COMBO_IMAGE_BUCKET_NAME"] = "food-combo-images-test"
os.environ.pop("COMBO_IMAGE_FOLDER", None)
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "FoodCombo")
os.environ.pop("AWS_ENDPOINT_URL", None)
os.environ.pop("IMAGE_PUBLIC_BASE_URL", None)

from core.services.provider import get_combo_service  # noqa: E402

PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


@pytest.fixture(autouse=True)
def reset_combo_service():
    """Drop the cached service so every test builds clients inside its own mock."""
    get_combo_service.cache_clear()
    yield
    get_combo_service.cache_clear()


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _cleanup_dynamodb_items(table):
    """Helper to delete all items from DynamoDB table."""
    try:
        scan_kwargs: dict[str, Any] = {"ProjectionExpression": "combo_id"}
        while True:
            response = table.scan(**scan_kwargs)
            items = response.get("Items", [])
            if items:
                with table.batch_writer() as batch:
                    for item in items:
                        batch.delete_item(Key={"combo_id": item["combo_id"]})

            if "LastEvaluatedKey" not in response:
                break
            scan_kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create and manage the combo table for testing.

    Cleanup Strategy:
    - Items are deleted after each test (teardown)
    - Table is NOT deleted (moto cleans up on context exit)
    """
    table_name = os.getenv("COMBO_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = dynamodb_resource.create_table(
            TableName=table_name,
            BillingMode="PAY_PER_REQUEST",
            KeySchema=[{"AttributeName": "combo_id", "KeyType": "HASH"}],
            AttributeDefinitions=[
                {"AttributeName": "combo_id", "AttributeType": "S"},
            ],
        )
        table.wait_until_exists()

    yield table

    _cleanup_dynamodb_items(table)


@pytest.fixture
def dynamodb_put_item(dynamodb_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single item into DynamoDB.

    Usage:
        item = dynamodb_put_item({"combo_id": "combo_1", "item_a": "Pizza"})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        dynamodb_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    """
    Helper to get a single item from DynamoDB.

    Usage:
        item = dynamodb_get_item("combo_123")
    """

    def _get(combo_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"combo_id": combo_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


def _cleanup_s3_objects(s3_client, bucket_name):
    """Helper to delete all objects from S3 bucket."""
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = page.get("Contents", [])
            if objects:
                delete_keys = [{"Key": obj["Key"]} for obj in objects]
                s3_client.delete_objects(Bucket=bucket_name, Delete={"Objects": delete_keys})
    except ClientError as e:
        if e.response["Error"]["Code"] != "NoSuchBucket":
            raise


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """
    Create and manage the image bucket for testing.

    Cleanup Strategy:
    - Objects are deleted after each test (teardown)
    - Bucket is NOT deleted (moto cleans up on context exit)
    """
    bucket_name = os.getenv("COMBO_IMAGE_BUCKET_NAME")

    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client

    _cleanup_s3_objects(s3_client, bucket_name)


@pytest.fixture
def s3_list_keys(s3_client) -> Callable[[], list[str]]:
    """
    Helper to list every object key in the image bucket.

    Usage:
        keys = s3_list_keys()
    """

    def _list() -> list[str]:
        bucket_name = os.getenv("COMBO_IMAGE_BUCKET_NAME")
        response: dict[str, Any] = s3_client.list_objects_v2(Bucket=bucket_name)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def s3_get_object(s3_client) -> Callable[[str], bytes]:
    """
    Helper to get an object from S3.

    Usage:
        content = s3_get_object("food-combos/imageA-1700000000000-ab12cd34.png")
    """

    def _get(key: str) -> bytes:
        bucket_name = os.getenv("COMBO_IMAGE_BUCKET_NAME")
        response: dict[str, Any] = s3_client.get_object(Bucket=bucket_name, Key=key)
        data: bytes = response["Body"].read()
        return data

    return _get


@pytest.fixture
def aws_resources(dynamodb_table, s3_bucket):
    """Table and bucket both present, for end-to-end handler tests."""
    return dynamodb_table, s3_bucket


@pytest.fixture
def sample_combo_item() -> dict[str, Any]:
    """Single stored combo item for testing."""
    return {
        "combo_id": "combo_1",
        "item_a": "Pizza",
        "item_b": "Coke",
        "image_a": "https://food-combo-images-test.s3.us-east-1.amazonaws.com/food-combos/a.png",
        "image_b": "https://food-combo-images-test.s3.us-east-1.amazonaws.com/food-combos/b.png",
        "image_a_key": "food-combos/a.png",
        "image_b_key": "food-combos/b.png",
        "bite": 0,
        "ban": 0,
        "created_at": "2024-01-01T10:00:00+00:00",
    }


@pytest.fixture
def multiple_combo_items() -> list[dict[str, Any]]:
    """Several stored combo items for list and random tests."""
    pairs = [("Pizza", "Coke"), ("Fries", "Milkshake"), ("Pancakes", "Bacon")]
    return [
        {
            "combo_id": f"combo_{index}",
            "item_a": item_a,
            "item_b": item_b,
            "image_a": f"https://cdn.example.com/{index}/a.png",
            "image_b": f"https://cdn.example.com/{index}/b.png",
            "bite": index,
            "ban": 0,
        }
        for index, (item_a, item_b) in enumerate(pairs, start=1)
    ]


@pytest.fixture
def dynamodb_with_multiple_combos(dynamodb_table, multiple_combo_items) -> list[dict[str, Any]]:
    """DynamoDB table pre-populated with several combos."""
    with dynamodb_table.batch_writer() as batch:
        for item in multiple_combo_items:
            batch.put_item(Item=item)
    return multiple_combo_items


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    return base64.b64decode(PNG_BASE64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal JPEG header)."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
