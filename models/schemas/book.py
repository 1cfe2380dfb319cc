from marshmallow import Schema, fields, post_load, validate

from models.book import Book


class BookSeedSchema(Schema):
    id = fields.String(required=True, validate=validate.Length(min=1))
    title = fields.String(required=True, validate=validate.Length(min=1))
    # Seed files use the GraphQL spelling
    author_id = fields.String(required=True, data_key="authorId")

    @post_load
    def _make_book(self, data, **kwargs):
        return Book(**data)
