"""
Lambda handler responsible for recording a bite or ban vote on a combo.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ServerError, ValidationError
from core.services.provider import get_combo_service
from core.utils.constants import MESSAGE_VOTE_RECORDED, METRIC_VOTE_RECORDED, METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import VoteRequest, VoteResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle vote requests (`PUT /vote/{combo_id}` with body `{"type": ...}`).

    A vote for an unknown combo id is still reported as recorded; the
    `result.matched` flag tells the two cases apart.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received vote request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    path_params = event.get("pathParameters") or {}

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request("Invalid JSON body", request_id=request_id)

    try:
        request = validate_request(
            VoteRequest,
            {"combo_id": path_params.get("combo_id"), "type": body.get("type")},
        )
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
        result = service.vote(combo_id=request.combo_id, vote_type=request.vote_type)

    except ValidationError as exc:
        logger.warning(
            "Vote rejected",
            extra={"combo_id": request.combo_id, "vote_type": request.vote_type},
        )
        return ResponseBuilder.bad_request(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    except ServerError as exc:
        logger.exception("Vote failed", extra={"combo_id": request.combo_id})
        return ResponseBuilder.internal_error(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    if result.matched:
        metrics.add_dimension(name="vote_type", value=result.vote_type)
        metrics.add_metric(name=METRIC_VOTE_RECORDED, unit=MetricUnit.Count, value=1)

    response = VoteResponse(
        message=MESSAGE_VOTE_RECORDED,
        result=result.model_dump(),
    )

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
