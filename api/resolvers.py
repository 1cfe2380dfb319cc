"""
Query, mutation and relationship handlers over a MemoryStorage.

Handlers take the store as their first argument and are transport-agnostic;
api/schema.py wires them to GraphQL fields. Hard failures raise an
InventoryError subclass; deletes report "nothing to delete" by returning False.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from models.author import Author
from models.book import Book
from models.exceptions import AuthorHasBooksError, DanglingReferenceError, NotFoundError
from utils.decorators import exclusive

logger = logging.getLogger(__name__)

DELETE_POLICIES = ("cascade", "restrict")


# Relationships

def author_of(storage, book: Book) -> Optional[Author]:
    return storage.get(Author, book.author_id)


def books_of(storage, author: Author) -> List[Book]:
    return [b for b in storage.all(Book) if b.author_id == author.id]


# Queries

@exclusive
def list_books(storage) -> List[Book]:
    return storage.all(Book)


@exclusive
def get_book(storage, id: str) -> Optional[Book]:
    return storage.get(Book, id)


@exclusive
def list_authors(storage) -> List[Author]:
    return storage.all(Author)


@exclusive
def get_author(storage, id: str) -> Optional[Author]:
    return storage.get(Author, id)


# Mutations

def _require_author(storage, author_id: str) -> Author:
    author = storage.get(Author, author_id)
    if author is None:
        raise DanglingReferenceError(author_id)
    return author


@exclusive
def add_book(storage, title: str, author_id: str) -> Book:
    _require_author(storage, author_id)
    book = storage.new(Book(title=title, author_id=author_id))
    logger.info("Added %s", book.to_dict())
    return book


@exclusive
def add_author(storage, name: str) -> Author:
    author = storage.new(Author(name=name))
    logger.info("Added %s", author.to_dict())
    return author


@exclusive
def update_book(storage, id: str, title: Optional[str] = None, author_id: Optional[str] = None) -> Book:
    """
    Partial update. Empty values count as "not supplied": update_book(id, title="")
    leaves the title alone. Every check runs before any field is written.
    """
    book = storage.get(Book, id)
    if book is None:
        raise NotFoundError("Book", id)
    if author_id:
        _require_author(storage, author_id)
        book.author_id = author_id
    if title:
        book.title = title
    logger.info("Updated %s", book.to_dict())
    return book


@exclusive
def update_author(storage, id: str, name: Optional[str] = None) -> Author:
    author = storage.get(Author, id)
    if author is None:
        raise NotFoundError("Author", id)
    if name:
        author.name = name
    logger.info("Updated %s", author.to_dict())
    return author


@exclusive
def delete_book(storage, id: str) -> bool:
    book = storage.get(Book, id)
    if book is None:
        return False
    storage.delete(book)
    logger.info("Deleted book %s", id)
    return True


@exclusive
def delete_author(storage, id: str, policy: str = "cascade") -> bool:
    """
    Delete an author.

    policy="cascade" removes the author's books first; policy="restrict"
    refuses with AuthorHasBooksError while any book still points at the author.
    """
    author = storage.get(Author, id)
    if author is None:
        return False
    if policy not in DELETE_POLICIES:
        raise ValueError(f"Unknown delete policy: {policy!r}")
    if books_of(storage, author):
        if policy == "restrict":
            raise AuthorHasBooksError(id)
        removed = storage.delete_where(Book, author_id=id)
        logger.info("Cascade removed %d book(s) of author %s", removed, id)
    storage.delete(author)
    logger.info("Deleted author %s", id)
    return True


# type name -> field name -> resolver(storage, parent)
RESOLVERS = {
    "Book": {"author": author_of},
    "Author": {"books": books_of},
}
