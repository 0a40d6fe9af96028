"""HTTP Stats Notifier Implementation

Concrete implementation of StatsNotifier using httpx with timeout and retry logic.
"""
import asyncio
import logging
import httpx
from typing import Any, Dict
from src.app.services.stats_notifier import (
    StatsNotifier,
    StatsNotifierError,
    StatsServiceUnavailable,
)

logger = logging.getLogger(__name__)


class HttpStatsNotifier(StatsNotifier):
    """
    HTTP implementation of StatsNotifier using httpx.

    Features:
    - 5 second timeout per request
    - Exponential backoff retry on connection errors: 1s, 2s, 4s
    - Idempotency-Key header so the service can drop replays
    """

    def __init__(self, base_url: str, timeout: float = 5.0, max_retries: int = 3):
        """
        Initialize HTTP stats notifier.

        Args:
            base_url: Base URL of stats service (e.g., "http://stats_api:8002")
            timeout: Request timeout in seconds (default: 5.0)
            max_retries: Maximum attempts per request (default: 3)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.client = httpx.AsyncClient(timeout=timeout)

    async def _retry_request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Execute HTTP request with exponential backoff on connection-level failures"""
        for attempt in range(self.max_retries):
            try:
                return await self.client.request(method, url, **kwargs)
            except (httpx.TimeoutException, httpx.ConnectError, httpx.ReadError) as e:
                if attempt < self.max_retries - 1:
                    delay = 2 ** attempt
                    logger.warning(
                        f"Stats request failed (attempt {attempt + 1}/{self.max_retries}), "
                        f"retrying in {delay}s: {e}"
                    )
                    await asyncio.sleep(delay)
                else:
                    logger.error(f"Stats request failed after {self.max_retries} attempts: {e}")

        raise StatsServiceUnavailable(
            f"Stats service unavailable after {self.max_retries} attempts"
        )

    async def _post(self, path: str, payload: Dict[str, Any], idempotency_key: str) -> None:
        url = f"{self.base_url}{path}"
        response = await self._retry_request(
            "POST", url, json=payload, headers={"Idempotency-Key": idempotency_key}
        )

        if response.status_code >= 500:
            logger.error(f"Stats service error (5xx): {response.status_code}")
            raise StatsServiceUnavailable(f"Stats service returned {response.status_code}")

        if 400 <= response.status_code < 500:
            error_message = _error_message(response)
            logger.error(f"Stats client error on {path}: {error_message}")
            raise StatsNotifierError(error_message, status_code=response.status_code)

    async def increment_stats(
        self,
        account_id: str,
        projects_completed: int,
        hours_contributed: int,
        idempotency_key: str,
    ) -> None:
        """POST to /stats/increment"""
        await self._post(
            "/stats/increment",
            {
                "account_id": account_id,
                "projects_completed": projects_completed,
                "hours_contributed": hours_contributed,
                "idempotency_key": idempotency_key,
            },
            idempotency_key,
        )

    async def recalculate_badges(self, account_id: str, idempotency_key: str) -> None:
        """POST to /badges/recalculate"""
        await self._post(
            "/badges/recalculate",
            {"account_id": account_id, "idempotency_key": idempotency_key},
            idempotency_key,
        )

    async def close(self):
        """Close the HTTP client connection"""
        await self.client.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json().get("error", {}).get("message", "Client error")
    except ValueError:
        return f"Stats service returned {response.status_code}"
