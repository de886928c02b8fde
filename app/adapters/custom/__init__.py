"""Offline Order service client."""

from ..base import OrderClient
from schemas import OrderDto


class StubOrderClient(OrderClient):
    """Order client that never leaves the process.

    Used for local development when no Order service URL is configured. It
    mirrors the ``OrderClient`` interface and answers every lookup with an
    ``{orderId}`` stub.
    """

    async def fetch_order(self, order_id: int) -> OrderDto:
        return OrderDto(order_id=order_id)

__all__ = ["StubOrderClient"]
