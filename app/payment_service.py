import asyncio
import logging
from typing import List

from adapters import OrderClient
from exceptions import PaymentNotFoundError, ValidationError
from mapping import dto_to_entity, entity_to_dto
from models import Payment
from repository import PaymentRepository
from schemas import PaymentDto

logger = logging.getLogger(__name__)


class PaymentService:
    """Payment operations backed by the store and the Order service.

    Stateless: all shared state lives in the repository. Errors from the
    collaborators propagate unchanged to the caller.
    """

    def __init__(self, repository: PaymentRepository, order_client: OrderClient):
        self._repository = repository
        self._order_client = order_client
        logger.info(
            f"PaymentService initialized with {order_client.__class__.__name__}"
        )

    async def _with_order(self, payment: Payment) -> PaymentDto:
        dto = entity_to_dto(payment)
        dto.order = await self._order_client.fetch_order(payment.order_id)
        return dto

    async def find_all(self) -> List[PaymentDto]:
        """List every payment with its order filled in.

        One order lookup per payment; the result keeps the store order. If
        a lookup fails, the lookups still in flight are cancelled.
        """
        payments = await self._repository.find_all()
        logger.debug("Fetching orders for %d payments", len(payments))
        tasks = [asyncio.create_task(self._with_order(p)) for p in payments]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def find_by_id(self, payment_id: int) -> PaymentDto:
        payment = await self._repository.find_by_id(payment_id)
        if payment is None:
            raise PaymentNotFoundError(f"Payment with id: {payment_id} not found")
        return await self._with_order(payment)

    async def save(self, payment_dto: PaymentDto) -> PaymentDto:
        """Create a payment. Any client supplied id is ignored."""
        payment = dto_to_entity(payment_dto)
        payment.payment_id = None
        stored = await self._repository.save(payment)
        logger.info("Created payment %s", stored.payment_id)
        return entity_to_dto(stored)

    async def update(self, payment_dto: PaymentDto) -> PaymentDto:
        """Replace the payment with ``payment_dto.payment_id``.

        An unknown id is inserted as given.
        """
        if payment_dto.payment_id is None:
            raise ValidationError("Payment id is required for update")
        stored = await self._repository.save(dto_to_entity(payment_dto))
        logger.info("Updated payment %s", stored.payment_id)
        return entity_to_dto(stored)

    async def delete_by_id(self, payment_id: int) -> None:
        await self._repository.delete_by_id(payment_id)
        logger.info("Deleted payment %s", payment_id)
