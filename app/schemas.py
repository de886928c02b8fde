"""Wire models exchanged over HTTP and with the Order service."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models import PaymentStatus


class OrderDto(BaseModel):
    """Order as served by the Order service.

    Only ``orderId`` is interpreted here; any other field the Order service
    returns is carried through untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    order_id: int = Field(alias="orderId")
    order_desc: Optional[str] = Field(default=None, alias="orderDesc")
    order_fee: Optional[float] = Field(default=None, alias="orderFee")


class PaymentDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_id: Optional[int] = Field(default=None, alias="paymentId")
    is_payed: Optional[bool] = Field(default=None, alias="isPayed")
    payment_status: Optional[PaymentStatus] = Field(
        default=None, alias="paymentStatus"
    )
    order: OrderDto


class PaymentCollection(BaseModel):
    collection: List[PaymentDto]


class ExceptionMsg(BaseModel):
    """Error envelope returned for every domain failure."""

    model_config = ConfigDict(populate_by_name=True)

    msg: str
    http_status: str = Field(alias="httpStatus")
    timestamp: datetime
