# python imports
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

# app imports
from .constants import ItemKind, SEARCH_FIELDS, RESULT_LIMITS
from .scoring import score

logger = logging.getLogger(__name__)


@dataclass
class SearchableItem:
    """
    Read-only projection of one catalog record for a single search.

    ``fields`` holds the record's searchable text in scoring order; the raw
    ``record`` is carried through untouched so callers get back every key
    the catalog returned. ``score`` is only written by the scanner that
    built the item.
    """

    kind: ItemKind
    id: Any
    fields: Tuple[Tuple[str, str], ...]
    record: Dict[str, Any]
    score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.record, searchScore=self.score, type=self.kind.value)


class CatalogScanner:
    """Scores every record of one catalog and keeps the best matches."""

    def __init__(self, kind: ItemKind, field_names: Iterable[str], limit: int):
        self.kind = kind
        self.field_names = tuple(field_names)
        self.limit = limit

    def project(self, record: Dict[str, Any]) -> SearchableItem:
        fields = []
        for name in self.field_names:
            value = record.get(name)
            fields.append((name, value if isinstance(value, str) else ""))
        return SearchableItem(
            kind=self.kind, id=record.get("id"), fields=tuple(fields), record=record
        )

    def score_item(self, item: SearchableItem, query: str) -> float:
        # Best single field wins; fields are not summed
        item.score = max((score(text, query) for _, text in item.fields), default=0.0)
        return item.score

    def scan(
        self, records: Optional[List[Dict[str, Any]]], query: str
    ) -> List[SearchableItem]:
        """
        Score, filter, rank and cap a catalog snapshot.

        Items scoring 0 are dropped. ``sorted`` is stable, so equal scores
        keep the order the catalog was fetched in.
        """
        if not records:
            return []

        matches = []
        for record in records:
            item = self.project(record)
            if self.score_item(item, query) > 0:
                matches.append(item)

        ranked = sorted(matches, key=lambda item: item.score, reverse=True)
        logger.debug(
            f"{self.kind.value} scan: {len(records)} records, "
            f"{len(matches)} matches, keeping {min(len(ranked), self.limit)}"
        )
        return ranked[: self.limit]


SCANNERS = {
    kind: CatalogScanner(kind, SEARCH_FIELDS[kind], RESULT_LIMITS[kind])
    for kind in ItemKind
}
