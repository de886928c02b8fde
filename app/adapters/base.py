"""Base classes for outbound Order service clients."""

from abc import ABC, abstractmethod

from schemas import OrderDto


class OrderClient(ABC):
    """Abstract base class for Order service clients."""

    @abstractmethod
    async def fetch_order(self, order_id: int) -> OrderDto:
        """Fetch a single order.

        Args:
            order_id: Identifier of the order in the Order service

        Returns:
            The order as served by the Order service

        Raises:
            InfrastructureError: If the Order service is unreachable,
                answers with a non-2xx status or returns an undecodable body
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the client."""
        return None
