import logging
from typing import List, Optional

from sqlalchemy import delete, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from exceptions import InfrastructureError
from models import Payment

logger = logging.getLogger(__name__)

# Moves the id sequence past every stored id; never moves it backwards.
_ADVANCE_ID_SEQUENCE = text(
    f"""
    WITH seq AS (
        SELECT pg_get_serial_sequence('{Payment.__tablename__}', 'payment_id')::regclass AS id
    )
    SELECT setval(
        seq.id,
        GREATEST(
            (SELECT coalesce(max(payment_id), 0) FROM {Payment.__tablename__}),
            coalesce(pg_sequence_last_value(seq.id), 0),
            1
        )
    )
    FROM seq
    """
)


async def advance_id_sequence(session: AsyncSession) -> None:
    """Keep the Postgres id sequence ahead of rows inserted with explicit ids.

    SQLite ``AUTOINCREMENT`` already tracks the highest id ever used.
    """
    if session.get_bind().dialect.name == "postgresql":
        await session.execute(_ADVANCE_ID_SEQUENCE)


class PaymentRepository:
    """Payment store backed by SQLAlchemy.

    Every call opens its own session and commits before returning, so the
    repository can be shared between concurrent requests.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        self._sessionmaker = sessionmaker

    async def find_all(self) -> List[Payment]:
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(
                    select(Payment).order_by(Payment.payment_id)
                )
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Failed to list payments: %s", exc)
            raise InfrastructureError(str(exc)) from exc

    async def find_by_id(self, payment_id: int) -> Optional[Payment]:
        try:
            async with self._sessionmaker() as session:
                return await session.get(Payment, payment_id)
        except SQLAlchemyError as exc:
            logger.error("Failed to load payment %s: %s", payment_id, exc)
            raise InfrastructureError(str(exc)) from exc

    async def save(self, payment: Payment) -> Payment:
        """Insert ``payment`` or replace the row that has its id."""
        try:
            async with self._sessionmaker() as session:
                stored = await session.merge(payment)
                if payment.payment_id is not None:
                    await session.flush()
                    await advance_id_sequence(session)
                await session.commit()
                return stored
        except SQLAlchemyError as exc:
            logger.error("Failed to save payment %s: %s", payment.payment_id, exc)
            raise InfrastructureError(str(exc)) from exc

    async def delete_by_id(self, payment_id: int) -> None:
        try:
            async with self._sessionmaker() as session:
                await session.execute(
                    delete(Payment).where(Payment.payment_id == payment_id)
                )
                await session.commit()
        except SQLAlchemyError as exc:
            logger.error("Failed to delete payment %s: %s", payment_id, exc)
            raise InfrastructureError(str(exc)) from exc

    async def count(self) -> int:
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(
                    select(func.count()).select_from(Payment)
                )
                return result.scalar_one()
        except SQLAlchemyError as exc:
            logger.error("Failed to count payments: %s", exc)
            raise InfrastructureError(str(exc)) from exc

    async def delete_all(self) -> None:
        try:
            async with self._sessionmaker() as session:
                await session.execute(delete(Payment))
                await session.commit()
        except SQLAlchemyError as exc:
            logger.error("Failed to delete payments: %s", exc)
            raise InfrastructureError(str(exc)) from exc
