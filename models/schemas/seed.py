from marshmallow import Schema, fields, validates_schema, ValidationError

from models.schemas.author import AuthorSeedSchema
from models.schemas.book import BookSeedSchema


def _duplicates(ids):
    seen, dupes = set(), []
    for i in ids:
        if i in seen and i not in dupes:
            dupes.append(i)
        seen.add(i)
    return dupes


class SeedSchema(Schema):
    """
    Whole-store seed payload:

        {"authors": [{"id": "1", "name": "..."}],
         "books": [{"id": "1", "title": "...", "authorId": "1"}]}

    Loading returns {"authors": [Author, ...], "books": [Book, ...]}.
    """

    authors = fields.List(fields.Nested(AuthorSeedSchema), load_default=list)
    books = fields.List(fields.Nested(BookSeedSchema), load_default=list)

    @validates_schema
    def _validate_references(self, data, **kwargs):
        authors = data.get("authors", [])
        books = data.get("books", [])
        errors = {}

        dup_authors = _duplicates(a.id for a in authors)
        if dup_authors:
            errors["authors"] = [f"Duplicate author id(s): {', '.join(dup_authors)}"]
        dup_books = _duplicates(b.id for b in books)
        if dup_books:
            errors["books"] = [f"Duplicate book id(s): {', '.join(dup_books)}"]

        author_ids = {a.id for a in authors}
        dangling = [b.id for b in books if b.author_id not in author_ids]
        if dangling:
            errors.setdefault("books", []).append(
                f"Book(s) {', '.join(dangling)} reference unknown authors"
            )
        if errors:
            raise ValidationError(errors)
