"""
Lambda handler responsible for creating a combo with its two images.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ServerError, ValidationError
from core.services.provider import get_combo_service
from core.utils.constants import MESSAGE_COMBO_CREATED, METRIC_COMBO_CREATED, METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import CreateComboRequest, CreateComboResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle combo creation requests.

    The handler validates the JSON payload, decodes both base64 images and
    delegates upload and persistence to the ComboService.

    Expected API Gateway event structure:
    {
        "body": "{\"itemA\": ..., \"itemB\": ..., \"imageA\": ..., \"imageB\": ...}"
    }

    Args:
        event: API Gateway Lambda proxy event containing the combo payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response with the new combo id
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received combo create request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request("Invalid JSON body", request_id=request_id)

    try:
        request = validate_request(CreateComboRequest, body)
    except PydanticValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            "Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    service = get_combo_service()

    try:
        combo = service.create_combo(
            item_a=request.item_a,
            item_b=request.item_b,
            image_a=service.decode_image(request.image_a) if request.image_a else None,
            image_b=service.decode_image(request.image_b) if request.image_b else None,
        )

    except ValidationError as exc:
        logger.warning("Combo create rejected", extra={"reason": exc.message})
        return ResponseBuilder.bad_request(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    except ServerError as exc:
        logger.exception("Infrastructure error during combo creation")
        return ResponseBuilder.internal_error(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    metrics.add_metric(name=METRIC_COMBO_CREATED, unit=MetricUnit.Count, value=1)

    response = CreateComboResponse(
        id=combo.combo_id,
        message=MESSAGE_COMBO_CREATED,
    )

    return ResponseBuilder.created(response.model_dump(), request_id=request_id)
