import enum
from typing import Optional

from sqlalchemy import Boolean, Enum, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class PaymentStatus(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Payment(Base):
    __tablename__ = "payments"
    # ids must never be reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    payment_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    order_id: Mapped[int] = mapped_column(Integer, nullable=False)
    is_payed: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    payment_status: Mapped[Optional[PaymentStatus]] = mapped_column(
        Enum(PaymentStatus, native_enum=False, length=20), nullable=True
    )

    def __repr__(self) -> str:
        return (
            f"Payment(payment_id={self.payment_id!r}, order_id={self.order_id!r}, "
            f"is_payed={self.is_payed!r}, payment_status={self.payment_status!r})"
        )
