# python imports
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

# project imports
from app.libs.errors import InvalidSearchQuery
from app.packages.services import PackageService
from app.plugins.services import PluginService
from app.categories.services import CategoryService

# app imports
from .constants import ItemKind
from .merger import merge_results
from .scanner import SCANNERS, CatalogScanner, SearchableItem
from .scoring import normalize_query

logger = logging.getLogger(__name__)

CatalogFetcher = Callable[[], Optional[List[Dict[str, Any]]]]


class SearchState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING = "fetching"
    SCORING = "scoring"
    MERGING = "merging"
    DONE = "done"
    FAILED = "failed"


class InternalScoringError(Exception):
    """Unexpected failure while scoring one catalog"""

    def __init__(self, kind: ItemKind, cause: BaseException):
        super().__init__(f"Scoring {kind.value} results failed: {cause}")
        self.kind = kind
        self.cause = cause


@dataclass
class SearchResponse:
    packages: List[SearchableItem] = field(default_factory=list)
    plugins: List[SearchableItem] = field(default_factory=list)
    categories: List[SearchableItem] = field(default_factory=list)
    all_results: List[SearchableItem] = field(default_factory=list)
    query: Optional[str] = ""
    error: Optional[str] = None
    state: SearchState = SearchState.DONE

    @property
    def total_results(self) -> int:
        return len(self.all_results)


def _enter(state: SearchState) -> SearchState:
    logger.debug(f"search state -> {state.value}")
    return state


class SearchService:
    """
    Runs one query against the three catalogs and merges the rankings.

    Each catalog is fetched and scored in its own worker; the only wait is
    the join before merging. A catalog that fails to load, or does not
    finish within ``timeout`` seconds, contributes an empty list. An error
    while scoring degrades the whole response to empty lists with an
    ``error`` message. ``search`` never raises.
    """

    def __init__(
        self,
        fetchers: Mapping[ItemKind, CatalogFetcher],
        max_workers: int = 3,
        timeout: Optional[float] = None,
        scanners: Optional[Mapping[ItemKind, CatalogScanner]] = None,
    ):
        self.fetchers = dict(fetchers)
        self.max_workers = max_workers
        self.timeout = timeout
        self.scanners = dict(scanners or SCANNERS)

    @classmethod
    def from_app(cls, app):
        """Build a service reading the catalogs from the app's database"""
        return cls(
            catalog_fetchers(app),
            max_workers=app.config.get("SEARCH_MAX_WORKERS", 3),
            timeout=app.config.get("SEARCH_FETCH_TIMEOUT"),
        )

    def search(self, query: Any) -> SearchResponse:
        _enter(SearchState.IDLE)
        _enter(SearchState.VALIDATING)
        try:
            normalized = self._validate(query)
        except InvalidSearchQuery as e:
            _enter(SearchState.FAILED)
            logger.info(f"Rejected search query: {e.message}")
            return SearchResponse(query=None, error=e.message, state=SearchState.FAILED)

        if not normalized:
            _enter(SearchState.DONE)
            return SearchResponse(query="")

        try:
            _enter(SearchState.FETCHING)
            buckets = self._run_pipelines(normalized)

            _enter(SearchState.MERGING)
            all_results = merge_results(
                buckets[ItemKind.PACKAGE],
                buckets[ItemKind.PLUGIN],
                buckets[ItemKind.CATEGORY],
            )
        except Exception as e:
            logger.exception(f"Search for '{normalized}' failed")
            _enter(SearchState.DONE)
            return SearchResponse(query=query, error=str(e))

        response = SearchResponse(
            packages=buckets[ItemKind.PACKAGE],
            plugins=buckets[ItemKind.PLUGIN],
            categories=buckets[ItemKind.CATEGORY],
            all_results=all_results,
            query=normalized,
        )
        _enter(SearchState.DONE)
        logger.info(
            f"Search '{normalized}' returned {response.total_results} results "
            f"(packages={len(response.packages)}, plugins={len(response.plugins)}, "
            f"categories={len(response.categories)})"
        )
        return response

    @staticmethod
    def _validate(query: Any) -> str:
        if query is None or not isinstance(query, str):
            raise InvalidSearchQuery()
        return normalize_query(query)

    def _run_pipelines(self, query: str) -> Dict[ItemKind, List[SearchableItem]]:
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="catalog-search"
        )
        try:
            futures = {
                executor.submit(self._run_pipeline, kind, query): kind
                for kind in ItemKind
            }
            _, pending = wait(futures, timeout=self.timeout)
            _enter(SearchState.SCORING)

            buckets = {}
            for future, kind in futures.items():
                if future in pending:
                    logger.warning(
                        f"{kind.value} catalog did not answer within "
                        f"{self.timeout}s, searching without it"
                    )
                    buckets[kind] = []
                    continue

                error = future.exception()
                if error is not None:
                    raise InternalScoringError(kind, error) from error
                buckets[kind] = future.result()
            return buckets
        finally:
            # Abandon stragglers; they hold no shared state
            executor.shutdown(wait=False, cancel_futures=True)

    def _run_pipeline(self, kind: ItemKind, query: str) -> List[SearchableItem]:
        records = self._fetch(kind)
        return self.scanners[kind].scan(records, query)

    def _fetch(self, kind: ItemKind) -> List[Dict[str, Any]]:
        fetch = self.fetchers.get(kind)
        if fetch is None:
            logger.warning(f"No fetcher configured for {kind.value} catalog")
            return []
        try:
            records = fetch()
        except Exception as e:
            logger.warning(f"{kind.value} catalog unavailable: {str(e)}")
            return []
        return records or []


def catalog_fetchers(app, limit: Optional[int] = None) -> Dict[ItemKind, CatalogFetcher]:
    """
    Database-backed fetchers for the three catalogs.

    Workers run outside the request thread, so each fetch pushes its own
    application context (and with it its own database session).
    """
    limit = limit or app.config.get("CATALOG_FETCH_LIMIT", 1000)

    def in_app_context(fetch):
        def run():
            with app.app_context():
                return fetch()

        return run

    return {
        ItemKind.PACKAGE: in_app_context(
            lambda: PackageService.get_searchable_packages(limit)
        ),
        ItemKind.PLUGIN: in_app_context(
            lambda: PluginService.get_searchable_plugins(limit)
        ),
        ItemKind.CATEGORY: in_app_context(CategoryService.get_searchable_categories),
    }
