"""
Test conversions between Payment entities and PaymentDto.
"""

import pytest

from mapping import dto_to_entity, entity_to_dto
from models import Payment, PaymentStatus
from schemas import OrderDto, PaymentDto


class TestEntityToDto:

    def test_copies_fields_and_builds_order_stub(self, completed_payment):
        dto = entity_to_dto(completed_payment)

        assert dto.payment_id == 1
        assert dto.is_payed is True
        assert dto.payment_status == PaymentStatus.COMPLETED
        assert dto.order is not None
        assert dto.order.order_id == 1
        assert dto.order.order_desc is None
        assert dto.order.order_fee is None

    def test_different_status(self):
        payment = Payment(
            payment_id=2,
            order_id=2,
            is_payed=False,
            payment_status=PaymentStatus.NOT_STARTED,
        )

        dto = entity_to_dto(payment)

        assert dto.payment_id == 2
        assert dto.order.order_id == 2
        assert dto.is_payed is False
        assert dto.payment_status == PaymentStatus.NOT_STARTED

    def test_unknown_paid_flag_stays_none(self):
        payment = Payment(payment_id=3, order_id=7, is_payed=None, payment_status=None)

        dto = entity_to_dto(payment)

        assert dto.is_payed is None
        assert dto.payment_status is None


class TestDtoToEntity:

    def test_copies_fields_and_order_id(self):
        dto = PaymentDto(
            payment_id=3,
            is_payed=False,
            payment_status=PaymentStatus.IN_PROGRESS,
            order=OrderDto(order_id=3),
        )

        payment = dto_to_entity(dto)

        assert payment.payment_id == 3
        assert payment.order_id == 3
        assert payment.is_payed is False
        assert payment.payment_status == PaymentStatus.IN_PROGRESS

    def test_missing_id_maps_to_none(self):
        dto = PaymentDto(is_payed=True, order=OrderDto(order_id=5))

        assert dto_to_entity(dto).payment_id is None


@pytest.mark.parametrize("status", [None, *PaymentStatus])
@pytest.mark.parametrize("is_payed", [None, True, False])
def test_entity_survives_mapping_both_ways(status, is_payed):
    payment = Payment(payment_id=11, order_id=4, is_payed=is_payed, payment_status=status)

    mapped_back = dto_to_entity(entity_to_dto(payment))

    assert mapped_back.payment_id == payment.payment_id
    assert mapped_back.order_id == payment.order_id
    assert mapped_back.is_payed == payment.is_payed
    assert mapped_back.payment_status == payment.payment_status


def test_payment_dto_uses_camel_case_wire_keys():
    dto = PaymentDto.model_validate(
        {
            "paymentId": 9,
            "isPayed": None,
            "paymentStatus": "COMPLETED",
            "order": {"orderId": 1, "orderDesc": "Desc", "orderFee": 10.5},
        }
    )

    assert dto.payment_id == 9
    assert dto.is_payed is None
    assert dto.payment_status == PaymentStatus.COMPLETED
    assert dto.order.order_desc == "Desc"

    wire = dto.model_dump(mode="json", by_alias=True)
    assert wire["order"]["orderId"] == 1
    assert "orderDto" not in wire
    assert wire["isPayed"] is None
    assert wire["paymentStatus"] == "COMPLETED"
