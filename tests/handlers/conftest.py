import base64
import json
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def create_combo_event(sample_image_binary, sample_jpeg_binary) -> dict[str, Any]:
    return {
        "httpMethod": "POST",
        "path": "/create",
        "body": json.dumps(
            {
                "itemA": "Pizza",
                "itemB": "Coke",
                "imageA": base64.b64encode(sample_image_binary).decode("utf-8"),
                "imageB": base64.b64encode(sample_jpeg_binary).decode("utf-8"),
            }
        ),
        "headers": {"Content-Type": "application/json"},
    }


@pytest.fixture
def make_vote_event():
    def _make(combo_id: str | None, vote_type: Any) -> dict[str, Any]:
        return {
            "httpMethod": "PUT",
            "path": f"/vote/{combo_id}",
            "pathParameters": {"combo_id": combo_id} if combo_id is not None else None,
            "body": json.dumps({"type": vote_type}),
        }

    return _make


@pytest.fixture
def make_delete_event():
    def _make(combo_id: str | None) -> dict[str, Any]:
        return {
            "httpMethod": "DELETE",
            "path": f"/delete/{combo_id}",
            "pathParameters": {"combo_id": combo_id} if combo_id is not None else None,
        }

    return _make


@pytest.fixture
def list_combos_event() -> dict[str, Any]:
    return {"httpMethod": "GET", "path": "/combos"}


@pytest.fixture
def random_combo_event() -> dict[str, Any]:
    return {"httpMethod": "GET", "path": "/random"}
