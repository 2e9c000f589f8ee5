"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_MISSING_FIELDS = "MISSING_FIELDS"
ERROR_CODE_INVALID_VOTE_TYPE = "INVALID_VOTE_TYPE"

# Image Storage Errors
ERROR_CODE_IMAGE_STORAGE = "IMAGE_STORAGE_ERROR"
ERROR_CODE_IMAGE_UPLOAD_FAILED = "IMAGE_UPLOAD_FAILED"
ERROR_CODE_IMAGE_DELETE_FAILED = "IMAGE_DELETE_FAILED"

# Combo Store Errors
ERROR_CODE_STORE = "STORE_ERROR"
ERROR_CODE_COMBO_CREATE_FAILED = "COMBO_CREATE_FAILED"
ERROR_CODE_COMBO_LIST_FAILED = "COMBO_LIST_FAILED"
ERROR_CODE_COMBO_COUNT_FAILED = "COMBO_COUNT_FAILED"
ERROR_CODE_COMBO_FETCH_FAILED = "COMBO_FETCH_FAILED"
ERROR_CODE_COMBO_VOTE_FAILED = "COMBO_VOTE_FAILED"
ERROR_CODE_COMBO_DELETE_FAILED = "COMBO_DELETE_FAILED"

# Internal / Unexpected
ERROR_CODE_SERVER_ERROR = "SERVER_ERROR"


# ============================================================================
# Combo Constraints
# ============================================================================

VOTE_TYPES: Final[frozenset[str]] = frozenset({"bite", "ban"})

COMBO_ID_PREFIX = "combo_"
DEFAULT_IMAGE_FOLDER = "food-combos"

IMAGE_FIELD_A = "imageA"
IMAGE_FIELD_B = "imageB"


# ============================================================================
# Image Content Types
# ============================================================================

DEFAULT_IMAGE_CONTENT_TYPE = "application/octet-stream"

MIME_TYPE_EXTENSION_MAP: Final[dict[str, str]] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


# ============================================================================
# User-facing Messages
# ============================================================================

MESSAGE_MISSING_FIELDS = "Missing fields or images"
MESSAGE_INVALID_VOTE_TYPE = "Invalid vote type"
MESSAGE_SERVER_ERROR = "Server error"
MESSAGE_DELETE_FAILED = "Delete failed"
MESSAGE_COMBO_CREATED = "Combo added successfully"
MESSAGE_VOTE_RECORDED = "Vote recorded"
MESSAGE_COMBO_DELETED = "Combo deleted"


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Metrics
# ============================================================================

METRICS_NAMESPACE = "FoodCombo"
METRIC_COMBO_CREATED = "ComboCreated"
METRIC_VOTE_RECORDED = "VoteRecorded"
METRIC_COMBO_DELETED = "ComboDeleted"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_COMBO_TABLE_NAME = "COMBO_TABLE_NAME"
ENV_COMBO_IMAGE_BUCKET_NAME = "COMBO_IMAGE_BUCKET_NAME"
ENV_COMBO_IMAGE_FOLDER = "COMBO_IMAGE_FOLDER"
ENV_IMAGE_PUBLIC_BASE_URL = "IMAGE_PUBLIC_BASE_URL"

DEFAULT_AWS_REGION = "us-east-1"
