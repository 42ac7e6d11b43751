import asyncio
import logging
import random

import httpx

from querysense.domain import AnalyzedQuery
from querysense.exceptions import ReportDeliveryError
from querysense.serialization import analyzed_query_to_dict

logger = logging.getLogger(__name__)


class HttpReportOutput:
    """Posts each report to an analysis history endpoint.

    Use as an async context manager so one client is shared across sends.
    """

    MAX_RETRIES = 3
    BASE_BACKOFF = 1.0
    MAX_JITTER = 0.5

    def __init__(self, endpoint: str, api_key: str | None = None, timeout: float = 30.0) -> None:
        self.endpoint = endpoint
        self.api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "http"

    async def __aenter__(self) -> "HttpReportOutput":
        self._client = httpx.AsyncClient(timeout=self._timeout)
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(self, analyzed: AnalyzedQuery) -> None:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        payload = analyzed_query_to_dict(analyzed)

        retries = 0
        while True:
            response = await self._client.post(self.endpoint, json=payload, headers=headers)

            if response.status_code == 429:
                if retries >= self.MAX_RETRIES:
                    raise ReportDeliveryError(
                        "Rate limit exceeded after max retries", status_code=429
                    )

                delay = self.BASE_BACKOFF * (2**retries) + random.uniform(0, self.MAX_JITTER)
                logger.warning("History endpoint rate limited, retrying in %.2fs", delay)
                await asyncio.sleep(delay)
                retries += 1
                continue

            if response.status_code >= 400:
                raise ReportDeliveryError(
                    f"History endpoint returned {response.status_code}",
                    status_code=response.status_code,
                )

            logger.debug("Stored report at %s (%d)", self.endpoint, response.status_code)
            return
