from typing import Any, Dict, List, Optional, TypeVar
from sqlalchemy import desc
from sqlalchemy.orm import Query
from sqlalchemy.sql.elements import ColumnElement
from math import ceil

from .errors import ValidationError

# Type variable for SQLAlchemy models
T = TypeVar("T")


class Paginator:
    def __init__(
        self,
        query: Query,
        page: int = 1,
        per_page: int = 12,
        sort_options: Optional[Dict[str, List[ColumnElement]]] = None,
    ) -> None:
        """
        Initialize paginator with SQLAlchemy query

        Args:
            query: SQLAlchemy query object
            page: Current page number (default: 1)
            per_page: Items per page (default: 12)
            sort_options: Named orderings the caller may choose from
        """
        self.query: Query = query
        self.page: int = page
        self.per_page: int = per_page
        self.max_per_page: int = 100  # Safety limit
        self.sort_options: Dict[str, List[ColumnElement]] = sort_options or {}

    def paginate(self, sort: Optional[str] = None) -> Dict[str, Any]:
        """
        Apply sorting and pagination to the query

        Returns:
            Dictionary containing:
            - items: List of paginated items
            - page: Current page number
            - per_page: Items per page
            - total_items: Total number of items
            - total_pages: Total number of pages
        """
        self._validate_pagination_params()
        self._apply_sorting(sort)

        items: List[Any] = (
            self.query.limit(self.per_page)
            .offset((self.page - 1) * self.per_page)
            .all()
        )

        total: int = self.query.order_by(None).count()

        return {
            "items": items,
            "page": self.page,
            "per_page": self.per_page,
            "total_items": total,
            "total_pages": ceil(total / self.per_page) if total else 0,
        }

    def _apply_sorting(self, sort: Optional[str]) -> None:
        """Apply a named ordering, newest first by default"""
        if sort:
            if sort not in self.sort_options:
                raise ValidationError(
                    f"Unknown sort '{sort}', expected one of: "
                    + ", ".join(sorted(self.sort_options))
                )
            self.query = self.query.order_by(*self.sort_options[sort])
            return

        entity = self.query.column_descriptions[0]["entity"]
        if hasattr(entity, "created_at"):
            self.query = self.query.order_by(desc(entity.created_at))

    def _validate_pagination_params(self) -> None:
        """Validate pagination parameters"""
        if self.page < 1:
            raise ValidationError("Page must be positive integer", 400)

        if self.per_page < 1 or self.per_page > self.max_per_page:
            raise ValidationError(
                f"per_page must be between 1 and {self.max_per_page}", 400
            )
