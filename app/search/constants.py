from enum import Enum


class ItemKind(Enum):
    PACKAGE = "package"
    PLUGIN = "plugin"
    CATEGORY = "category"


# Match tiers
EXACT_MATCH_SCORE = 100.0
PREFIX_MATCH_SCORE = 80.0
SUBSTRING_MATCH_SCORE = 60.0
FUZZY_MATCH_CEILING = 50.0

# Searchable fields per catalog, in scoring order
SEARCH_FIELDS = {
    ItemKind.PACKAGE: ("title", "description", "category"),
    ItemKind.PLUGIN: ("name", "description", "category"),
    ItemKind.CATEGORY: ("name", "description"),
}

# Per-catalog result caps
RESULT_LIMITS = {
    ItemKind.PACKAGE: 10,
    ItemKind.PLUGIN: 10,
    ItemKind.CATEGORY: 5,
}
