"""Client registration and maintenance."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Client, ClientStatus, Simulation
from app.schemas import ClientCreateRequest, ClientUpdateRequest

from .errors import ConflictError, NotFoundError
from .simulations import delete_simulation_tree

logger = logging.getLogger(__name__)


def _normalize_email(value: str) -> str:
    return value.strip().lower()


async def _ensure_unique(
    session: AsyncSession,
    *,
    email: str | None,
    tax_id: str | None,
    exclude_id: UUID | None = None,
) -> None:
    conditions = []
    if email:
        conditions.append(Client.email == email)
    if tax_id:
        conditions.append(Client.tax_id == tax_id)
    if not conditions:
        return
    stmt = select(Client).where(or_(*conditions))
    if exclude_id is not None:
        stmt = stmt.where(Client.id != exclude_id)
    existing = (await session.execute(stmt)).scalars().first()
    if existing is None:
        return
    if email and existing.email == email:
        raise ConflictError("A client with this email already exists")
    raise ConflictError("A client with this tax id already exists")


async def create_client(payload: ClientCreateRequest, session: AsyncSession) -> Client:
    email = _normalize_email(payload.email)
    tax_id = payload.tax_id.strip() if payload.tax_id else None
    await _ensure_unique(session, email=email, tax_id=tax_id)

    client = Client(
        name=payload.name.strip(),
        email=email,
        tax_id=tax_id,
        phone=payload.phone,
        birthdate=payload.birthdate,
        status=ClientStatus(payload.status),
    )
    session.add(client)
    await session.commit()
    await session.refresh(client)
    logger.info("Created client %s", client.id)
    return client


async def get_client(client_id: UUID, session: AsyncSession) -> Client:
    client = await session.get(Client, client_id)
    if client is None:
        raise NotFoundError("Client", client_id)
    return client


async def list_clients(session: AsyncSession) -> list[Client]:
    result = await session.execute(select(Client).order_by(Client.created_at, Client.name))
    return list(result.scalars().all())


async def update_client(client_id: UUID, payload: ClientUpdateRequest, session: AsyncSession) -> Client:
    client = await get_client(client_id, session)
    changes = payload.model_dump(exclude_unset=True)

    email = _normalize_email(changes["email"]) if changes.get("email") else None
    tax_id = changes["tax_id"].strip() if changes.get("tax_id") else None
    await _ensure_unique(
        session,
        email=email if email != client.email else None,
        tax_id=tax_id if tax_id != client.tax_id else None,
        exclude_id=client.id,
    )

    if email:
        changes["email"] = email
    if "tax_id" in changes:
        changes["tax_id"] = tax_id
    if changes.get("status") is not None:
        changes["status"] = ClientStatus(changes["status"])
    if changes.get("name"):
        changes["name"] = changes["name"].strip()

    for field, value in changes.items():
        if value is None and field in {"name", "email", "status"}:
            continue
        setattr(client, field, value)

    await session.commit()
    await session.refresh(client)
    return client


async def delete_client(client_id: UUID, session: AsyncSession) -> None:
    client = await get_client(client_id, session)
    simulation_ids = (
        await session.execute(select(Simulation.id).where(Simulation.client_id == client.id))
    ).scalars().all()
    for simulation_id in simulation_ids:
        await delete_simulation_tree(simulation_id, session)
    await session.delete(client)
    await session.commit()
    logger.info("Deleted client %s with %d simulations", client_id, len(simulation_ids))


__all__ = ["create_client", "delete_client", "get_client", "list_clients", "update_client"]
