"""
Inventory API client.

Walks DRF-style paginated list endpoints (``results`` plus a ``next`` link)
and returns the whole collection. Transport and HTTP errors are not caught
here: a failed page fails the whole fetch.
"""

from __future__ import annotations

import time
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urljoin

import requests

from config.settings import Settings
from utils.error_handling import PaginationError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class ApiClient:
    """Read-only client for the inventory REST API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or Settings.from_environment()
        self.base_url = self.settings.api_base_url.rstrip("/") + "/"
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if self.settings.api_token:
            self.session.headers.update(
                {"Authorization": f"Bearer {self.settings.api_token}"}
            )

    def url_for(self, endpoint: str) -> str:
        """Resolve an endpoint path against the base URL; absolute URLs pass through."""
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def fetch_all(
        self, endpoint: str, params: Optional[Dict[str, Any]] = None
    ) -> List[dict]:
        """
        Follow ``next`` links from the first page until exhausted.

        Records come back in page order, then server order within a page. A
        bare JSON array is treated as a single unpaginated page.
        """
        start = time.perf_counter()
        url: Optional[str] = self.url_for(endpoint)
        records: List[dict] = []
        pages = 0

        while url:
            if pages >= self.settings.max_pages:
                raise PaginationError(
                    f"{endpoint} exceeded {self.settings.max_pages} pages"
                )
            response = self.session.get(
                url,
                params=params if pages == 0 else None,
                timeout=self.settings.request_timeout_seconds,
            )
            response.raise_for_status()
            page_records, next_url = self._parse_page(response.json(), endpoint)
            records.extend(page_records)
            pages += 1
            url = urljoin(url, next_url) if next_url else None

        logger.info(
            "Collection fetched",
            extra={
                "endpoint": endpoint,
                "pages": pages,
                "record_count": len(records),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return records

    @staticmethod
    def _parse_page(body: Any, endpoint: str) -> Tuple[List[dict], Optional[str]]:
        """Split a page body into its records and next-page link."""
        if isinstance(body, list):
            return body, None
        if not isinstance(body, dict):
            raise PaginationError(f"{endpoint} returned a non-object page")

        results = body.get("results")
        if not isinstance(results, list):
            raise PaginationError(f"{endpoint} page has no results list")
        return results, body.get("next")

    def fetch_many(
        self, collections: Mapping[str, Tuple[str, Optional[Dict[str, Any]]]]
    ) -> Dict[str, List[dict]]:
        """
        Fetch several collections concurrently, all or nothing.

        ``collections`` maps a name to ``(endpoint, params)``. The first
        failure (in submission order among those finished) is re-raised as
        soon as it is seen; fetches still in flight are abandoned.
        """
        pool = ThreadPoolExecutor(
            max_workers=max(1, len(collections)), thread_name_prefix="fetch"
        )
        try:
            futures: Dict[str, Future] = {
                name: pool.submit(self.fetch_all, endpoint, params)
                for name, (endpoint, params) in collections.items()
            }
            done, _ = wait(futures.values(), return_when=FIRST_EXCEPTION)
            for name, future in futures.items():
                if future in done and future.exception() is not None:
                    logger.error(
                        "Collection fetch failed",
                        extra={"collection": name, "error": str(future.exception())},
                    )
                    raise future.exception()
            return {name: future.result() for name, future in futures.items()}
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
