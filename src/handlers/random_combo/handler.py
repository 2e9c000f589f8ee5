"""
Lambda handler responsible for returning one random combo.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import ServerError
from core.services.provider import get_combo_service
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle random combo requests.

    Returns:
        200 with the combo, or 204 with an empty body when no combo is available
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received random combo request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    try:
        combo = get_combo_service().random_combo()
    except ServerError as exc:
        logger.exception("Failed to pick a random combo")
        return ResponseBuilder.internal_error(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    if combo is None:
        return ResponseBuilder.no_content()

    return ResponseBuilder.ok(combo.to_public(), request_id=request_id)
