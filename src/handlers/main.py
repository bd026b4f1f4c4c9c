"""
Single entrypoint that routes HTTP API requests to thin handler modules.

Keeping one entrypoint lets the lazily built services stay warm across
routes while each route's logic lives in its own module.
"""

from typing import Callable, Dict, Tuple
import json
import re

from . import customer_profile, customer_report, health_check

_PROFILE_PATH = re.compile(r"^/customers/[^/]+/profile/?$")


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    """
    Entry point invoked by the HTTP API.

    The event carries the method and path; we match it against the route
    table in order and hand the event to the first match.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "").upper()
    path = event.get("requestContext", {}).get("http", {}).get("path", "")

    route_table: Tuple[Tuple[str, Callable[[str], bool], Callable], ...] = (
        ("GET", lambda p: p == "/health", health_check.lambda_handler),
        ("GET", lambda p: p.rstrip("/") == "/customers/report", customer_report.lambda_handler),
        ("GET", lambda p: bool(_PROFILE_PATH.match(p)), customer_profile.lambda_handler),
    )

    for route_method, matches, handler in route_table:
        if method == route_method and matches(path):
            return handler(event, context)

    return _response(404, {"message": "Route not found", "route": f"{method} {path}"})
