from marshmallow import Schema, fields, post_load, validate

from models.author import Author


class AuthorSeedSchema(Schema):
    id = fields.String(required=True, validate=validate.Length(min=1))
    name = fields.String(required=True, validate=validate.Length(min=1))

    @post_load
    def _make_author(self, data, **kwargs):
        return Author(**data)
