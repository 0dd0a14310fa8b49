"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from app.db.session import Database

from .allocations import get_allocations_router
from .clients import get_clients_router
from .insurances import get_insurances_router
from .projections import get_projections_router
from .simulations import get_simulations_router


def build_api_router(database: Database) -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(get_clients_router(database))
    api_router.include_router(get_simulations_router(database))
    api_router.include_router(get_allocations_router(database))
    api_router.include_router(get_insurances_router(database))
    api_router.include_router(get_projections_router(database))
    return api_router


__all__ = ["build_api_router"]
