from marshmallow import Schema, fields


class CategorySchema(Schema):
    id = fields.Int(dump_only=True)
    name = fields.Str(required=True)
    slug = fields.Str()
    description = fields.Str(allow_none=True)
    parent_id = fields.Int(allow_none=True)
    is_active = fields.Bool()
    has_subcategories = fields.Bool(dump_only=True)


class CategoryTreeSchema(Schema):
    id = fields.Int()
    name = fields.Str()
    slug = fields.Str()
    description = fields.Str(allow_none=True)
    children = fields.List(fields.Nested(lambda: CategoryTreeSchema()))
