"""Handler for GET /customers/report."""

import uuid
from typing import Optional

import requests

from models.response import ApiResponse
from utils.error_handling import AppError, ForbiddenError, UpstreamError, to_response
from utils.logging_config import get_logger
from utils.permissions import Capability, has_capability, role_from_event
from utils.price_formatter import format_price

logger = get_logger(__name__)

# Lazy-loaded service so importing the router does not build HTTP sessions
_report_service: Optional["CustomerReportService"] = None


def _get_report_service():
    """Lazy-load CustomerReportService."""
    global _report_service
    if _report_service is None:
        from services.customer_service import CustomerReportService
        _report_service = CustomerReportService()
    return _report_service


def lambda_handler(event, context):
    """Return enriched customers with tier and summary figures."""
    correlation_id = str(uuid.uuid4())
    role = role_from_event(event)
    if role is not None and not has_capability(role, Capability.VIEW_REPORTS):
        return to_response(ForbiddenError("Role may not view customer reports"))

    try:
        report = _get_report_service().build_report()
    except requests.RequestException as exc:
        logger.error(
            "Customer report fetch failed",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return to_response(UpstreamError("Failed to load customers from inventory API"))
    except AppError as exc:
        logger.error(
            "Customer report failed",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return to_response(exc)

    logger.info(
        "Customer report served",
        extra={
            "correlation_id": correlation_id,
            "total_customers": report.total_customers,
            "total_revenue": format_price(report.total_revenue),
        },
    )
    body = ApiResponse(
        message="Customer report built",
        data=report,
        correlation_id=correlation_id,
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": body.model_dump_json(),
    }
