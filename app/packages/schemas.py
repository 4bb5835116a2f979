from marshmallow import Schema, fields
from app.libs.schemas import PaginationQueryArgs, PaginationSchema


class PackageSchema(Schema):
    id = fields.Int(dump_only=True)
    title = fields.Str(required=True)
    subtitle = fields.Str(allow_none=True)
    price = fields.Str(required=True)
    image_url = fields.Str(allow_none=True)
    description = fields.Str(required=True)
    long_description = fields.Str(allow_none=True)
    features = fields.List(fields.Str())
    category_id = fields.Int(allow_none=True)
    category = fields.Str(attribute="category_name", dump_only=True)
    featured = fields.Bool()
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)


class PackageQueryArgs(PaginationQueryArgs):
    category_id = fields.Int(required=False)
    featured = fields.Bool(required=False)


class PackageListSchema(Schema):
    items = fields.List(fields.Nested(PackageSchema))
    pagination = fields.Nested(PaginationSchema)
