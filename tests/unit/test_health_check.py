import json
from unittest.mock import patch

from handlers import health_check


def test_health_check_returns_ok():
    resp = health_check.lambda_handler({}, None)
    assert resp["statusCode"] == 200
    assert "ok" in resp["body"]


def test_health_check_includes_environment():
    with patch.dict("os.environ", {"ENVIRONMENT": "test"}):
        body = json.loads(health_check.lambda_handler({}, None)["body"])
    assert body["environment"] == "test"
    assert "timestamp" in body
