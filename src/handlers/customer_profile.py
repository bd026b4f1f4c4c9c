"""Handler for GET /customers/{id}/profile."""

import json
from typing import Optional

import requests

from utils.error_handling import AppError, ForbiddenError, UpstreamError, to_response
from utils.logging_config import get_logger
from utils.permissions import Capability, has_capability, role_from_event

logger = get_logger(__name__)

_profile_service: Optional["ProfileService"] = None


def _get_profile_service():
    """Lazy-load ProfileService."""
    global _profile_service
    if _profile_service is None:
        from services.profile_service import ProfileService
        _profile_service = ProfileService()
    return _profile_service


def _customer_id_from(event) -> Optional[str]:
    path_params = event.get("pathParameters") or {}
    if path_params.get("id"):
        return path_params["id"]
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    parts = [p for p in path.split("/") if p]
    # /customers/{id}/profile
    if len(parts) == 3 and parts[0] == "customers" and parts[2] == "profile":
        return parts[1]
    return None


def lambda_handler(event, context):
    """Return order statistics and tier for one customer."""
    customer_id = _customer_id_from(event)
    if not customer_id:
        return {
            "statusCode": 400,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"message": "customer id is required"}),
        }

    role = role_from_event(event)
    if role is not None and not has_capability(role, Capability.VIEW_REPORTS):
        return to_response(ForbiddenError("Role may not view customer profiles"))

    try:
        profile = _get_profile_service().build_profile(customer_id)
    except requests.RequestException as exc:
        logger.error(
            "Customer profile fetch failed",
            extra={"customer_id": customer_id, "error": str(exc)},
        )
        return to_response(UpstreamError("Failed to load customer data"))
    except AppError as exc:
        return to_response(exc)

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": profile.model_dump_json(),
    }
