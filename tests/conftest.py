"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from services import customer_service` to work
when running tests, matching the deployed layout where src/ is the
import root.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing."""
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Offline-friendly defaults; nothing in the suite talks to a real API.
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("API_BASE_URL", "http://inventory.test/api")
os.environ.setdefault("API_TIMEOUT_SECONDS", "5")


def _make_response(payload, status_code: int = 200):
    """Build a MagicMock that looks like a requests.Response."""
    import requests

    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


def _page(results, next_url=None):
    """DRF-style page body."""
    return {"count": len(results), "next": next_url, "previous": None, "results": results}


class FakeSession:
    """Session double that serves canned responses keyed by URL."""

    def __init__(self, routes):
        self.routes = routes
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        outcome = self.routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def settings():
    from config.settings import Settings

    return Settings(api_base_url="http://inventory.test/api", max_pages=50)


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def page_body():
    return _page
