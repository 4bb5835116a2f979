from marshmallow import Schema, fields, validate


class PaginationQueryArgs(Schema):
    page = fields.Int(required=False, load_default=1, validate=validate.Range(min=1))
    per_page = fields.Int(
        required=False, load_default=12, validate=validate.Range(min=1, max=100)
    )
    search = fields.Str(required=False)
    sort = fields.Str(required=False)


class PaginationSchema(Schema):
    page = fields.Int()
    per_page = fields.Int()
    total_items = fields.Int()
    total_pages = fields.Int()
