"""
Lambda handler responsible for deleting a combo.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.models.errors import ServerError
from core.services.provider import get_combo_service
from core.utils.constants import MESSAGE_COMBO_DELETED, METRIC_COMBO_DELETED, METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import DeleteComboRequest, DeleteComboResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle combo deletion requests.

    This function:
    - Extracts the combo identifier from API Gateway path parameters
    - Delegates deletion to the service layer
    - Reports success whether or not the combo existed

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received combo delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    path_params = event.get("pathParameters") or {}

    try:
        request = validate_request(
            DeleteComboRequest,
            {"combo_id": path_params.get("combo_id")},
        )
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            "Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    try:
        get_combo_service().delete_combo(combo_id=request.combo_id)

    except ServerError as exc:
        logger.exception(
            "Deletion failed",
            extra={"combo_id": request.combo_id},
        )
        return ResponseBuilder.internal_error(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    metrics.add_metric(name=METRIC_COMBO_DELETED, unit=MetricUnit.Count, value=1)

    response = DeleteComboResponse(
        id=request.combo_id,
        message=MESSAGE_COMBO_DELETED,
    )

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
