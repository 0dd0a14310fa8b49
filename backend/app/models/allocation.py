"""Allocation and ledger transaction models."""

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

from .client import enum_values

if TYPE_CHECKING:
    from .simulation import Simulation


class AllocationKind(str, enum.Enum):
    FINANCIAL = "financial"
    PROPERTY = "property"


class TransactionKind(str, enum.Enum):
    CONTRIBUTION = "contribution"
    WITHDRAWAL = "withdrawal"
    YIELD = "yield"
    FEE = "fee"


class Allocation(Base):
    __tablename__ = "allocations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    simulation_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("simulations.id", ondelete="CASCADE"), index=True)
    type: Mapped[AllocationKind] = mapped_column(
        Enum(AllocationKind, name="allocation_type", values_callable=enum_values)
    )
    description: Mapped[str] = mapped_column(String(255))
    percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    initial_value: Mapped[Decimal] = mapped_column(Numeric(18, 2))
    annual_return: Mapped[Decimal] = mapped_column(Numeric(7, 4), default=Decimal("0"))
    allocation_date: Mapped[date] = mapped_column(Date)
    monthly_payment: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    remaining_payments: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )

    simulation: Mapped[Simulation] = relationship(back_populates="allocations")
    transactions: Mapped[list[Transaction]] = relationship(back_populates="allocation", passive_deletes=True)


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_allocation_date", "allocation_id", "transaction_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    allocation_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("allocations.id", ondelete="CASCADE"))
    type: Mapped[TransactionKind] = mapped_column(
        Enum(TransactionKind, name="transaction_type", values_callable=enum_values)
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2))
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    transaction_date: Mapped[date] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )

    allocation: Mapped[Allocation] = relationship(back_populates="transactions")


__all__ = ["Allocation", "AllocationKind", "Transaction", "TransactionKind"]
