"""
Environment-specific configuration settings.

Defaults point at a local Django development server.
"""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class Settings:
    """Inventory API connection settings."""

    # Environment
    environment: str = "dev"

    # Inventory API
    api_base_url: str = "http://127.0.0.1:8000/api"
    api_token: Optional[str] = None

    # List endpoints, relative to api_base_url
    customers_endpoint: str = "/customers/"
    orders_endpoint: str = "/orders/"
    order_items_endpoint: str = "/order-items/"

    # Request behaviour
    request_timeout_seconds: float = 10.0
    max_pages: int = 1000  # Upper bound on a single next-link chain

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        defaults = cls()
        return cls(
            environment=os.environ.get("ENVIRONMENT", defaults.environment),
            api_base_url=os.environ.get("API_BASE_URL", defaults.api_base_url),
            api_token=os.environ.get("API_TOKEN") or None,
            customers_endpoint=os.environ.get(
                "CUSTOMERS_ENDPOINT", defaults.customers_endpoint
            ),
            orders_endpoint=os.environ.get("ORDERS_ENDPOINT", defaults.orders_endpoint),
            order_items_endpoint=os.environ.get(
                "ORDER_ITEMS_ENDPOINT", defaults.order_items_endpoint
            ),
            request_timeout_seconds=float(
                os.environ.get("API_TIMEOUT_SECONDS", defaults.request_timeout_seconds)
            ),
            max_pages=int(os.environ.get("API_MAX_PAGES", defaults.max_pages)),
        )
