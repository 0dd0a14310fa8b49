"""Service-layer modules for the planning API."""

from .errors import ConflictError, InvalidInputError, NotFoundError

__all__ = ["ConflictError", "InvalidInputError", "NotFoundError"]
