"""
Event source client for the Events Service.
"""

from typing import Any, Dict, Optional

import httpx

from shared.logging import get_logger
from shared.errors import ExternalServiceError


class EventSourceClient:
    """Client for the remote event data document and its JSON Schema."""

    def __init__(
        self,
        data_url: str,
        schema_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.data_url = data_url
        self.schema_url = schema_url
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger("events.source_client")

    async def fetch_event_data(self) -> Optional[Dict[str, Any]]:
        """Fetch the event data document; None on a non-success status."""
        return await self._fetch_document(self.data_url, "event data")

    async def fetch_schema(self) -> Optional[Dict[str, Any]]:
        """Fetch the event data JSON Schema; None on a non-success status."""
        return await self._fetch_document(self.schema_url, "schema data")

    async def _fetch_document(self, url: str, document: str) -> Optional[Dict[str, Any]]:
        """GET a JSON object document."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            self.logger.error(f"Failed to fetch {document}", url=url, error=str(exc))
            raise ExternalServiceError(
                service="event_source",
                message=str(exc) or exc.__class__.__name__,
                details={"url": url, "document": document}
            ) from exc

        if not response.is_success:
            self.logger.error(
                f"Failed to fetch {document}",
                url=url,
                status_code=response.status_code
            )
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            self.logger.error(f"Invalid JSON in {document}", url=url, error=str(exc))
            raise ExternalServiceError(
                service="event_source",
                message=f"{document} is not valid JSON",
                details={"url": url, "document": document}
            ) from exc

        if not isinstance(payload, dict):
            raise ExternalServiceError(
                service="event_source",
                message=f"{document} is not a JSON object",
                details={"url": url, "document": document, "type": type(payload).__name__}
            )

        self.logger.debug(f"Fetched {document}", url=url, status_code=response.status_code)
        return payload
