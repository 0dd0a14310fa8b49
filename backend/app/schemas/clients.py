"""Schemas for client registration and maintenance."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

ClientStatusValue = Literal["alive", "deceased", "disabled"]


class ClientCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Maria Souza"])
    email: EmailStr
    tax_id: str | None = Field(default=None, max_length=32, description="National tax identifier")
    phone: str | None = Field(default=None, max_length=32)
    birthdate: date | None = None
    status: ClientStatusValue = "alive"


class ClientUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    tax_id: str | None = Field(default=None, max_length=32)
    phone: str | None = Field(default=None, max_length=32)
    birthdate: date | None = None
    status: ClientStatusValue | None = None


class ClientSchema(BaseModel):
    id: UUID
    name: str
    email: str
    tax_id: str | None = None
    phone: str | None = None
    birthdate: date | None = None
    status: ClientStatusValue
    created_at: datetime
    updated_at: datetime


__all__ = ["ClientCreateRequest", "ClientSchema", "ClientStatusValue", "ClientUpdateRequest"]
