"""Lightweight health check handler."""

import os
import json
from datetime import datetime, timezone


def lambda_handler(event, context):
    """Return a simple 200 response with the configured API target."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "api_base_url": os.environ.get("API_BASE_URL", "http://127.0.0.1:8000/api"),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
