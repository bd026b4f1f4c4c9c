"""
Local handler tests using mocks.

These tests validate handler logic without a running inventory API.

Run with: pytest tests/unit/test_handlers_local.py -v
"""

import json
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock, patch

import requests


def _report():
    from services.customer_service import summarize
    from models.customer import EnrichedCustomer
    from services.tier_service import classify

    customer = EnrichedCustomer(
        id=1,
        name="Ada Obi",
        total_spent=Decimal("12000000"),
        total_orders=3,
        tier=classify(Decimal("12000000")),
    )
    return summarize([customer], generated_at=datetime(2026, 1, 1, tzinfo=timezone.utc))


class TestCustomerReportHandler:
    """GET /customers/report."""

    def test_returns_report(self):
        from handlers import customer_report

        mock_service = MagicMock()
        mock_service.build_report.return_value = _report()

        with patch.object(customer_report, "_get_report_service", return_value=mock_service):
            resp = customer_report.lambda_handler({}, None)

        assert resp["statusCode"] == 200
        body = json.loads(resp["body"])
        assert body["message"] == "Customer report built"
        assert body["correlation_id"]
        assert body["data"]["gold_customers"] == 1
        assert body["data"]["customers"][0]["tier"]["label"] == "Gold"

    def test_upstream_failure_returns_502(self):
        from handlers import customer_report

        mock_service = MagicMock()
        mock_service.build_report.side_effect = requests.ConnectionError("refused")

        with patch.object(customer_report, "_get_report_service", return_value=mock_service):
            resp = customer_report.lambda_handler({}, None)

        assert resp["statusCode"] == 502
        assert json.loads(resp["body"])["status"] == "error"

    def test_pagination_error_returns_its_status(self):
        from handlers import customer_report
        from utils.error_handling import PaginationError

        mock_service = MagicMock()
        mock_service.build_report.side_effect = PaginationError("bad page")

        with patch.object(customer_report, "_get_report_service", return_value=mock_service):
            resp = customer_report.lambda_handler({}, None)

        assert resp["statusCode"] == 502
        assert json.loads(resp["body"])["message"] == "bad page"


class TestCustomerProfileHandler:
    """GET /customers/{id}/profile."""

    def test_missing_id_returns_400(self):
        from handlers import customer_profile

        resp = customer_profile.lambda_handler({"pathParameters": None}, None)
        assert resp["statusCode"] == 400

    def test_id_from_path(self):
        from handlers import customer_profile
        from models.order import CustomerProfile, OrderStats
        from services.tier_service import classify

        profile = CustomerProfile(
            customer_id="5",
            orders=[],
            items_by_order={},
            stats=OrderStats(),
            lifetime_spend=Decimal("0"),
            tier=classify(0),
        )
        mock_service = MagicMock()
        mock_service.build_profile.return_value = profile
        event = {"requestContext": {"http": {"method": "GET", "path": "/customers/5/profile"}}}

        with patch.object(customer_profile, "_get_profile_service", return_value=mock_service):
            resp = customer_profile.lambda_handler(event, None)

        mock_service.build_profile.assert_called_once_with("5")
        assert resp["statusCode"] == 200
        assert json.loads(resp["body"])["tier"]["label"] == "New"

    def test_upstream_failure_returns_502(self):
        from handlers import customer_profile

        mock_service = MagicMock()
        mock_service.build_profile.side_effect = requests.Timeout("slow")

        with patch.object(customer_profile, "_get_profile_service", return_value=mock_service):
            resp = customer_profile.lambda_handler({"pathParameters": {"id": "5"}}, None)

        assert resp["statusCode"] == 502


class TestRoleGate:
    """Handlers honour the forwarded x-user-role header."""

    def test_unknown_role_is_forbidden(self):
        from handlers import customer_report

        mock_service = MagicMock()
        with patch.object(customer_report, "_get_report_service", return_value=mock_service):
            resp = customer_report.lambda_handler({"headers": {"X-User-Role": "intern"}}, None)

        assert resp["statusCode"] == 403
        mock_service.build_report.assert_not_called()

    def test_known_role_is_allowed(self):
        from handlers import customer_report

        mock_service = MagicMock()
        mock_service.build_report.return_value = _report()
        with patch.object(customer_report, "_get_report_service", return_value=mock_service):
            resp = customer_report.lambda_handler({"headers": {"x-user-role": "viewer"}}, None)

        assert resp["statusCode"] == 200

    def test_profile_unknown_role_is_forbidden(self):
        from handlers import customer_profile

        event = {"pathParameters": {"id": "5"}, "headers": {"x-user-role": "guest"}}
        resp = customer_profile.lambda_handler(event, None)
        assert resp["statusCode"] == 403
