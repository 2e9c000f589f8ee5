"""
Lambda handler responsible for listing every combo.

Bound to both `GET /combos` and the `GET /all` alias.
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
    """Return all combos in store order, without pagination."""
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received combo list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    try:
        combos = get_combo_service().list_combos()
    except ServerError as exc:
        logger.exception("Failed to list combos")
        return ResponseBuilder.internal_error(
            exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    return ResponseBuilder.ok(
        {
            "combos": [combo.to_public() for combo in combos],
            "count": len(combos),
        },
        request_id=request_id,
    )
