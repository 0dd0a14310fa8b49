"""Client endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import Database
from app.models import Client
from app.schemas import ClientCreateRequest, ClientSchema, ClientUpdateRequest
from app.services import clients as client_service

from ..errors import to_http_exception


def serialize_client(client: Client) -> ClientSchema:
    return ClientSchema(
        id=client.id,
        name=client.name,
        email=client.email,
        tax_id=client.tax_id,
        phone=client.phone,
        birthdate=client.birthdate,
        status=client.status.value,
        created_at=client.created_at,
        updated_at=client.updated_at,
    )


def get_clients_router(database: Database) -> APIRouter:
    router = APIRouter(prefix="/clients", tags=["clients"])

    @router.post("", response_model=ClientSchema, status_code=status.HTTP_201_CREATED)
    async def post_client(
        payload: ClientCreateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> ClientSchema:
        try:
            client = await client_service.create_client(payload, session)
        except (LookupError, ValueError) as exc:
            raise to_http_exception(exc) from exc
        return serialize_client(client)

    @router.get("", response_model=list[ClientSchema])
    async def get_clients(session: AsyncSession = Depends(database.get_session)) -> list[ClientSchema]:
        return [serialize_client(c) for c in await client_service.list_clients(session)]

    @router.get("/{client_id}", response_model=ClientSchema)
    async def get_client(client_id: UUID, session: AsyncSession = Depends(database.get_session)) -> ClientSchema:
        try:
            client = await client_service.get_client(client_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return serialize_client(client)

    @router.put("/{client_id}", response_model=ClientSchema)
    async def put_client(
        client_id: UUID,
        payload: ClientUpdateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> ClientSchema:
        try:
            client = await client_service.update_client(client_id, payload, session)
        except (LookupError, ValueError) as exc:
            raise to_http_exception(exc) from exc
        return serialize_client(client)

    @router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_client(client_id: UUID, session: AsyncSession = Depends(database.get_session)) -> Response:
        try:
            await client_service.delete_client(client_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["get_clients_router", "serialize_client"]
