"""
Remote Store Client

Best-effort mirror of the inventory to a sheet-backed web app endpoint.
GET returns the product list, POST replaces it with the request body.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from core.service_client_base import BaseServiceClient
from .models import InventoryData
from .protocols import RemoteNetworkError, RemoteParseError

logger = logging.getLogger(__name__)


class RemoteStoreClient(BaseServiceClient):
    """Remote Store HTTP client"""

    service_name = "remote_store"

    def __init__(self, endpoint: str, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Remote Store client

        Args:
            endpoint: Web app URL serving the product list
            client: Injected HTTP client (tests)
        """
        # No client-side timeout; the sync engine bounds each call
        super().__init__(base_url=endpoint, timeout=None, client=client, follow_redirects=True)
        # Requests go to the endpoint exactly as configured, trailing slash included
        self.base_url = endpoint.strip()

    @property
    def endpoint(self) -> str:
        return self.base_url

    async def read_remote(self) -> InventoryData:
        """
        Fetch the remote snapshot

        Returns:
            InventoryData

        Raises:
            RemoteNetworkError: transport failure or non-2xx status
            RemoteParseError: body is not a JSON list of products
        """
        try:
            response = await self.get()
        except httpx.HTTPError as e:
            raise RemoteNetworkError(f"GET {self.endpoint} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise RemoteNetworkError(
                f"GET {self.endpoint} returned {response.status_code}",
                status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteParseError(f"Remote payload is not JSON: {e}") from e

        try:
            data = InventoryData.from_records(payload)
        except ValidationError as e:
            raise RemoteParseError(f"Remote payload is not a product list: {e.error_count()} validation errors") from e

        logger.info(f"Loaded {len(data.products)} products from remote store")
        return data

    async def write_remote(self, data: InventoryData) -> bool:
        """
        Push the snapshot; a failed write is dropped, not retried

        Returns:
            True when the endpoint acknowledged with a 2xx status
        """
        try:
            response = await self.post(content=data.to_json())
        except httpx.HTTPError as e:
            logger.error(f"Failed to sync with remote store: {e}")
            return False

        if not 200 <= response.status_code < 300:
            logger.error(f"Failed to sync with remote store: HTTP {response.status_code}")
            return False

        logger.debug(f"Synced {len(data.products)} products to remote store")
        return True


__all__ = ["RemoteStoreClient"]
