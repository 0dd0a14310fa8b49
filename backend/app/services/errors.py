"""Service-layer exceptions translated into HTTP errors by the routes."""

from __future__ import annotations


class NotFoundError(LookupError):
    def __init__(self, resource: str, identifier: object):
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class ConflictError(ValueError):
    """Raised when a write would violate a uniqueness rule."""


class InvalidInputError(ValueError):
    """Raised when request values are well-formed but unusable together."""


__all__ = ["ConflictError", "InvalidInputError", "NotFoundError"]
