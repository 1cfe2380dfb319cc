"""
Domain errors raised by the query and mutation handlers.

Each error carries an ErrorKind; ``extensions`` is picked up by graphql-core
when the error surfaces from a resolver, so clients see the kind under
``errors[].extensions.code``.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    CONFLICT = "CONFLICT"


class InventoryError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict:
        return {"code": self.kind.value}


class NotFoundError(InventoryError):
    """The record targeted by an update does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} with ID {entity_id} does not exist")
        self.entity = entity
        self.entity_id = entity_id


class DanglingReferenceError(InventoryError):
    """A supplied authorId names no existing author."""

    kind = ErrorKind.DANGLING_REFERENCE

    def __init__(self, author_id: str):
        super().__init__(f"Author with ID {author_id} does not exist")
        self.author_id = author_id


class AuthorHasBooksError(InventoryError):
    kind = ErrorKind.CONFLICT

    def __init__(self, author_id: str):
        super().__init__(f"Cannot delete author with ID {author_id} because they have books")
        self.author_id = author_id
