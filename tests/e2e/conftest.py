"""
E2E fixtures for a Food Combo API deployed to LocalStack.

Every test here is skipped when no such API can be found.
"""

import logging

import boto3
from botocore.exceptions import ClientError
import pytest

from e2e_api_client import E2EAPIClient

logger = logging.getLogger(__name__)

S3_IMAGE_BUCKET_NAME = "food-combo-images-snd"
DYNAMODB_TABLE_NAME = "food-combos-snd"
ENDPOINT_BASE_URL = "http://localhost:4566"

# ============================================================================
# API Details Fixture
# ============================================================================


@pytest.fixture(scope="session")
def api_details():
    """Get API Gateway details from LocalStack"""
    try:
        apigateway = boto3.client("apigateway", endpoint_url=ENDPOINT_BASE_URL)

        apis = apigateway.get_rest_apis()
        api = next(api for api in apis["items"] if "food-combo" in api["name"])
        api_id = api["id"]

        keys = apigateway.get_api_keys(includeValues=True)
        api_key = keys["items"][0]["value"] if keys["items"] else "test-key"

        endpoint = f"{ENDPOINT_BASE_URL}/restapis/{api_id}/snd/_user_request_"

        return {"api_id": api_id, "api_key": api_key, "endpoint": endpoint, "stage": "snd"}
    except Exception as e:
        logger.warning(f"Could not get API details from LocalStack: {e}")
        pytest.skip(f"Could not get API details from LocalStack: {e}")


@pytest.fixture(scope="session")
def api_headers(api_details):
    """Default HTTP headers for API requests"""
    return {"Content-Type": "application/json", "x-api-key": api_details["api_key"]}


@pytest.fixture
def api_client(api_details, api_headers):
    """HTTP client wrapper for E2E API testing"""
    _client = E2EAPIClient(api_details["endpoint"], api_headers)
    _cleanup_s3()
    _cleanup_dynamodb()
    yield _client


def _cleanup_s3():
    """Clean all objects from S3 bucket"""
    logger.info("Cleaning S3 bucket: %s", S3_IMAGE_BUCKET_NAME)

    s3_client = boto3.client("s3", endpoint_url=ENDPOINT_BASE_URL)

    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        deleted = 0
        for page in paginator.paginate(Bucket=S3_IMAGE_BUCKET_NAME):
            for obj in page.get("Contents", []):
                s3_client.delete_object(Bucket=S3_IMAGE_BUCKET_NAME, Key=obj["Key"])
                deleted += 1

        logger.info("Deleted %d objects from S3 bucket", deleted)

    except ClientError as err:
        logger.error("Failed to cleanup S3 bucket: %s", S3_IMAGE_BUCKET_NAME, exc_info=err)


def _cleanup_dynamodb():
    """Delete all items from the combo table."""
    logger.info("Cleaning DynamoDB table: %s", DYNAMODB_TABLE_NAME)

    dynamodb = boto3.resource("dynamodb", endpoint_url=ENDPOINT_BASE_URL)
    table = dynamodb.Table(DYNAMODB_TABLE_NAME)

    try:
        deleted = 0
        start_key = None

        while True:
            scan_kwargs = {"ProjectionExpression": "combo_id"}
            if start_key:
                scan_kwargs["ExclusiveStartKey"] = start_key

            response = table.scan(**scan_kwargs)

            for item in response.get("Items", []):
                table.delete_item(Key={"combo_id": item["combo_id"]})
                deleted += 1

            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                break

        logger.info("Deleted %d items from DynamoDB table", deleted)

    except ClientError as err:
        logger.error(
            "Failed to cleanup DynamoDB table: %s",
            DYNAMODB_TABLE_NAME,
            exc_info=err,
        )


# ============================================================================
# Sample Data
# ============================================================================

SAMPLE_PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


@pytest.fixture
def combo_payload() -> dict:
    return {
        "itemA": "Pizza",
        "itemB": "Coke",
        "imageA": SAMPLE_PNG_BASE64,
        "imageB": SAMPLE_PNG_BASE64,
    }
