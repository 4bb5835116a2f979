from .models import Plugin

# Filter Keys
PLUGIN_FILTER_KEYS = {
    "SEARCH": "search",
    "CATEGORY_ID": "category_id",
    "FEATURED": "featured",
    "IS_PREMIUM": "is_premium",
    "SORT": "sort",
}

PLUGIN_SORT_OPTIONS = {
    "newest": [Plugin.created_at.desc()],
    "oldest": [Plugin.created_at.asc()],
    "popular": [Plugin.downloads.desc()],
    "name": [Plugin.name.asc()],
    "updated": [Plugin.updated_at.desc()],
}
