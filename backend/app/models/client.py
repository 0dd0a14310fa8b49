"""Client model."""

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from .simulation import Simulation


class ClientStatus(str, enum.Enum):
    ALIVE = "alive"
    DECEASED = "deceased"
    DISABLED = "disabled"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values rather than member names."""

    return [member.value for member in enum_cls]


class Client(Base):
    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    tax_id: Mapped[str | None] = mapped_column(String(32), unique=True, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    birthdate: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[ClientStatus] = mapped_column(
        Enum(ClientStatus, name="client_status", values_callable=enum_values),
        default=ClientStatus.ALIVE,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )

    simulations: Mapped[list[Simulation]] = relationship(back_populates="client", passive_deletes=True)


__all__ = ["Client", "ClientStatus", "enum_values"]
