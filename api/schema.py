"""
GraphQL schema for the Bookstore API.

Resolvers return the stored records themselves; strawberry reads plain
fields (id, title, name) off them and calls the relationship resolvers from
api.resolvers.RESOLVERS only when a query selects Book.author or Author.books.
The MemoryStorage arrives through the request context (see api/graphql_view.py).
"""
import logging
from typing import List, Optional

import strawberry
from strawberry.types import Info

from models.exceptions import InventoryError
from . import resolvers
from .resolvers import RESOLVERS

logger = logging.getLogger(__name__)


def _storage(info: Info):
    return info.context["storage"]


@strawberry.type(name="Author", description="An author and the books they have written")
class AuthorType:
    id: strawberry.ID
    name: str

    @strawberry.field
    def books(self, info: Info) -> Optional[List[Optional["BookType"]]]:
        return RESOLVERS["Author"]["books"](_storage(info), self)


@strawberry.type(name="Book", description="A book, written by exactly one author")
class BookType:
    id: strawberry.ID
    title: str

    @strawberry.field
    def author(self, info: Info) -> AuthorType:
        return RESOLVERS["Book"]["author"](_storage(info), self)


@strawberry.type
class Query:
    @strawberry.field(description="Get all books")
    def books(self, info: Info) -> Optional[List[Optional[BookType]]]:
        return resolvers.list_books(_storage(info))

    @strawberry.field(description="Get a book by ID")
    def book(self, info: Info, id: strawberry.ID) -> Optional[BookType]:
        return resolvers.get_book(_storage(info), id)

    @strawberry.field(description="Get all authors")
    def authors(self, info: Info) -> Optional[List[Optional[AuthorType]]]:
        return resolvers.list_authors(_storage(info))

    @strawberry.field(description="Get an author by ID")
    def author(self, info: Info, id: strawberry.ID) -> Optional[AuthorType]:
        return resolvers.get_author(_storage(info), id)


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Add a new book")
    def add_book(self, info: Info, title: str, author_id: strawberry.ID) -> Optional[BookType]:
        return resolvers.add_book(_storage(info), title, author_id)

    @strawberry.mutation(description="Add a new author")
    def add_author(self, info: Info, name: str) -> Optional[AuthorType]:
        return resolvers.add_author(_storage(info), name)

    @strawberry.mutation(description="Update a book")
    def update_book(
        self,
        info: Info,
        id: strawberry.ID,
        title: Optional[str] = None,
        author_id: Optional[strawberry.ID] = None,
    ) -> Optional[BookType]:
        return resolvers.update_book(_storage(info), id, title=title, author_id=author_id)

    @strawberry.mutation(description="Update an author")
    def update_author(self, info: Info, id: strawberry.ID, name: Optional[str] = None) -> Optional[AuthorType]:
        return resolvers.update_author(_storage(info), id, name=name)

    @strawberry.mutation(description="Delete a book")
    def delete_book(self, info: Info, id: strawberry.ID) -> Optional[bool]:
        return resolvers.delete_book(_storage(info), id)

    @strawberry.mutation(description="Delete an author")
    def delete_author(self, info: Info, id: strawberry.ID) -> Optional[bool]:
        policy = info.context.get("delete_policy", "cascade")
        return resolvers.delete_author(_storage(info), id, policy=policy)


class BookstoreSchema(strawberry.Schema):
    def process_errors(self, errors, execution_context=None):
        # Domain errors are expected outcomes: no traceback
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, InventoryError):
                logger.warning("%s: %s", error.original_error.kind.value, error.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = BookstoreSchema(query=Query, mutation=Mutation)
