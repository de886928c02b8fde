"""Conversions between the ``Payment`` entity and ``PaymentDto``."""

from models import Payment
from schemas import OrderDto, PaymentDto


def entity_to_dto(payment: Payment) -> PaymentDto:
    """Map an entity to its DTO with an ``{orderId}`` order stub.

    Filling in the full order is left to the service layer.
    """
    return PaymentDto(
        payment_id=payment.payment_id,
        is_payed=payment.is_payed,
        payment_status=payment.payment_status,
        order=OrderDto(order_id=payment.order_id),
    )


def dto_to_entity(dto: PaymentDto) -> Payment:
    return Payment(
        payment_id=dto.payment_id,
        order_id=dto.order.order_id,
        is_payed=dto.is_payed,
        payment_status=dto.payment_status,
    )
