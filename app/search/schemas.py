from marshmallow import Schema, fields, post_dump


class ScoredItems(fields.Field):
    """A ranked list of SearchableItems, each dumped as record + searchScore + type"""

    def _serialize(self, value, attr, obj, **kwargs):
        return [item.to_dict() for item in value or []]


class SearchQueryArgs(Schema):
    q = fields.Str(required=False, metadata={"description": "Free-text query"})


class SearchResponseSchema(Schema):
    """Response schema for the unified search endpoint.

    {
      "packages": [...],
      "plugins": [...],
      "categories": [...],
      "allResults": [...],
      "query": "logo",
      "totalResults": 3
    }

    ``error`` is only present when the query was rejected or scoring failed;
    ``query`` is omitted for rejected queries.
    """

    packages = ScoredItems(required=True)
    plugins = ScoredItems(required=True)
    categories = ScoredItems(required=True)
    all_results = ScoredItems(data_key="allResults", required=True)
    query = fields.Str(allow_none=True)
    total_results = fields.Int(data_key="totalResults", required=True)
    error = fields.Str(allow_none=True)

    @post_dump
    def drop_unset(self, data, **kwargs):
        for key in ("query", "error"):
            if data.get(key) is None:
                data.pop(key, None)
        return data
