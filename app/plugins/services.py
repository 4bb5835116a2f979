# python imports
import logging

# package imports
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

# project imports
from app.libs.session import session_scope
from app.libs.pagination import Paginator
from app.libs.errors import NotFoundError, CatalogUnavailableError

# app imports
from .models import Plugin
from .constants import PLUGIN_FILTER_KEYS, PLUGIN_SORT_OPTIONS

logger = logging.getLogger(__name__)


class PluginService:
    @staticmethod
    def get_plugin(plugin_id):
        try:
            with session_scope() as session:
                plugin = (
                    session.query(Plugin)
                    .options(joinedload(Plugin.category))
                    .filter(Plugin.id == plugin_id, Plugin.is_active.is_(True))
                    .first()
                )
                if not plugin:
                    raise NotFoundError("Plugin not found")
                return plugin
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching plugin {plugin_id}: {str(e)}")
            raise CatalogUnavailableError("plugins")

    @staticmethod
    def list_plugins(args):
        """Paginated listing of active plugins with optional filters"""
        try:
            with session_scope() as session:
                base_query = (
                    session.query(Plugin)
                    .filter(Plugin.is_active.is_(True))
                    .options(joinedload(Plugin.category))
                )

                paginator = Paginator(
                    base_query,
                    page=args.get("page", 1),
                    per_page=args.get("per_page", 12),
                    sort_options=PLUGIN_SORT_OPTIONS,
                )

                if args.get(PLUGIN_FILTER_KEYS["SEARCH"]):
                    search = f"%{args[PLUGIN_FILTER_KEYS['SEARCH']]}%"
                    paginator.query = paginator.query.filter(
                        or_(
                            Plugin.name.ilike(search),
                            Plugin.short_description.ilike(search),
                            Plugin.author.ilike(search),
                        )
                    )

                if PLUGIN_FILTER_KEYS["CATEGORY_ID"] in args:
                    paginator.query = paginator.query.filter(
                        Plugin.category_id == args[PLUGIN_FILTER_KEYS["CATEGORY_ID"]]
                    )

                if args.get(PLUGIN_FILTER_KEYS["FEATURED"]):
                    paginator.query = paginator.query.filter(Plugin.featured.is_(True))

                # is_premium=false is a filter too, not just "unset"
                if PLUGIN_FILTER_KEYS["IS_PREMIUM"] in args:
                    paginator.query = paginator.query.filter(
                        Plugin.is_premium.is_(bool(args[PLUGIN_FILTER_KEYS["IS_PREMIUM"]]))
                    )

                result = paginator.paginate(args.get(PLUGIN_FILTER_KEYS["SORT"]))

                return {
                    "items": result["items"],
                    "pagination": {
                        "page": result["page"],
                        "per_page": result["per_page"],
                        "total_items": result["total_items"],
                        "total_pages": result["total_pages"],
                    },
                }
        except SQLAlchemyError as e:
            logger.error(f"Database error listing plugins: {str(e)}")
            raise CatalogUnavailableError("plugins")

    @staticmethod
    def get_searchable_plugins(limit=1000):
        """Active plugins as plain dictionaries, category name included"""
        try:
            with session_scope() as session:
                plugins = (
                    session.query(Plugin)
                    .options(joinedload(Plugin.category))
                    .filter(Plugin.is_active.is_(True))
                    .order_by(Plugin.created_at.desc(), Plugin.id.desc())
                    .limit(limit)
                    .all()
                )
                return [
                    dict(plugin.to_dict(), category=plugin.category_name)
                    for plugin in plugins
                ]
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching searchable plugins: {str(e)}")
            raise CatalogUnavailableError("plugins")
