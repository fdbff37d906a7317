"""HTTP access to the station dataset."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

DATA_SOURCE_URL = "https://www.datos.gov.co/resource/57sv-p2fu.json"

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Base class for failures that leave the pipeline without data."""


class NetworkError(FetchError):
    """Transport failure or a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(FetchError):
    """Response body is not a JSON array of objects."""


class StationFetcher:
    """Single-shot client for the open-data endpoint.

    No retries, no caching and no explicit timeout: httpx transport defaults
    apply. A custom transport can be injected for tests.
    """

    def __init__(
        self,
        url: str = DATA_SOURCE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self._transport = transport

    async def fetch_records(self) -> List[Dict[str, Any]]:
        try:
            response = await self._get()
        except FetchError as exc:
            logger.error(
                "Fetching station records failed: %s",
                exc,
                extra={"url": self.url, "status_code": getattr(exc, "status_code", None)},
            )
            raise

        try:
            payload = self._decode(response)
        except ParseError as exc:
            logger.error(
                "Station payload could not be decoded: %s",
                exc,
                extra={"url": self.url, "status_code": response.status_code},
            )
            raise

        logger.info(
            "Fetched station records",
            extra={"url": self.url, "record_count": len(payload)},
        )
        return payload

    async def _get(self) -> httpx.Response:
        async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
            try:
                response = await client.get(self.url)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise NetworkError(
                    f"HTTP error, status {exc.response.status_code}",
                    status_code=exc.response.status_code,
                ) from exc
            except httpx.HTTPError as exc:
                raise NetworkError(f"Request failed: {exc}") from exc
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> List[Dict[str, Any]]:
        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"Response body is not valid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise ParseError(f"Expected a JSON array, got {type(payload).__name__}.")
        if not all(isinstance(item, dict) for item in payload):
            raise ParseError("Expected every array element to be a JSON object.")
        return payload
