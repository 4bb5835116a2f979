from marshmallow import Schema, fields
from app.libs.schemas import PaginationQueryArgs, PaginationSchema


class PluginSchema(Schema):
    id = fields.Int(dump_only=True)
    name = fields.Str(required=True)
    slug = fields.Str()
    short_description = fields.Str(allow_none=True)
    description = fields.Str(required=True)
    author = fields.Str(allow_none=True)
    version = fields.Str()
    price = fields.Str(allow_none=True)
    is_premium = fields.Bool()
    downloads = fields.Int(dump_only=True)
    tags = fields.List(fields.Str())
    category_id = fields.Int(allow_none=True)
    category = fields.Str(attribute="category_name", dump_only=True)
    featured = fields.Bool()
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)


class PluginQueryArgs(PaginationQueryArgs):
    category_id = fields.Int(required=False)
    featured = fields.Bool(required=False)
    is_premium = fields.Bool(required=False)


class PluginListSchema(Schema):
    items = fields.List(fields.Nested(PluginSchema))
    pagination = fields.Nested(PaginationSchema)
