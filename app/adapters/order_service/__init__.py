"""HTTP client for the Order service."""

import logging
from typing import Optional

import httpx

from ..base import OrderClient
from exceptions import InfrastructureError
from schemas import OrderDto

logger = logging.getLogger(__name__)


class HttpOrderClient(OrderClient):
    """Reads orders with ``GET <base_url>/<orderId>``.

    No caching and no retries: each call is exactly one request. The client
    may share an ``httpx.AsyncClient`` owned by the application; a private
    one is created (and closed by ``close``) otherwise.
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def order_url(self, order_id: int) -> str:
        return f"{self._base_url}/{order_id}"

    async def fetch_order(self, order_id: int) -> OrderDto:
        url = self.order_url(order_id)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Order lookup %s failed: %s", url, exc)
            raise InfrastructureError(
                f"Failed to fetch order {order_id}: {exc}"
            ) from exc

        try:
            return OrderDto.model_validate(response.json())
        except ValueError as exc:  # includes pydantic.ValidationError
            logger.error("Order %s returned an invalid body: %s", order_id, exc)
            raise InfrastructureError(
                f"Invalid order payload for order {order_id}: {exc}"
            ) from exc

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

__all__ = ["HttpOrderClient"]
