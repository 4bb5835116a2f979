from .models import Package

# Filter Keys
PACKAGE_FILTER_KEYS = {
    "SEARCH": "search",
    "CATEGORY_ID": "category_id",
    "FEATURED": "featured",
    "SORT": "sort",
}

PACKAGE_SORT_OPTIONS = {
    "newest": [Package.created_at.desc()],
    "oldest": [Package.created_at.asc()],
    "title": [Package.title.asc()],
    "updated": [Package.updated_at.desc()],
}
