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
from .models import Package
from .constants import PACKAGE_FILTER_KEYS, PACKAGE_SORT_OPTIONS

logger = logging.getLogger(__name__)


class PackageService:
    @staticmethod
    def get_package(package_id):
        try:
            with session_scope() as session:
                package = (
                    session.query(Package)
                    .options(joinedload(Package.category))
                    .filter(Package.id == package_id, Package.is_active.is_(True))
                    .first()
                )
                if not package:
                    raise NotFoundError("Package not found")
                return package
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching package {package_id}: {str(e)}")
            raise CatalogUnavailableError("packages")

    @staticmethod
    def list_packages(args):
        """Paginated listing of active packages with optional filters"""
        try:
            with session_scope() as session:
                base_query = (
                    session.query(Package)
                    .filter(Package.is_active.is_(True))
                    .options(joinedload(Package.category))
                )

                paginator = Paginator(
                    base_query,
                    page=args.get("page", 1),
                    per_page=args.get("per_page", 12),
                    sort_options=PACKAGE_SORT_OPTIONS,
                )

                if args.get(PACKAGE_FILTER_KEYS["SEARCH"]):
                    search = f"%{args[PACKAGE_FILTER_KEYS['SEARCH']]}%"
                    paginator.query = paginator.query.filter(
                        or_(
                            Package.title.ilike(search),
                            Package.subtitle.ilike(search),
                            Package.description.ilike(search),
                        )
                    )

                if PACKAGE_FILTER_KEYS["CATEGORY_ID"] in args:
                    paginator.query = paginator.query.filter(
                        Package.category_id == args[PACKAGE_FILTER_KEYS["CATEGORY_ID"]]
                    )

                if args.get(PACKAGE_FILTER_KEYS["FEATURED"]):
                    paginator.query = paginator.query.filter(
                        Package.featured.is_(True)
                    )

                result = paginator.paginate(args.get(PACKAGE_FILTER_KEYS["SORT"]))

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
            logger.error(f"Database error listing packages: {str(e)}")
            raise CatalogUnavailableError("packages")

    @staticmethod
    def get_searchable_packages(limit=1000):
        """Active packages as plain dictionaries, category name included"""
        try:
            with session_scope() as session:
                packages = (
                    session.query(Package)
                    .options(joinedload(Package.category))
                    .filter(Package.is_active.is_(True))
                    .order_by(Package.created_at.desc(), Package.id.desc())
                    .limit(limit)
                    .all()
                )
                return [
                    dict(package.to_dict(), category=package.category_name)
                    for package in packages
                ]
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching searchable packages: {str(e)}")
            raise CatalogUnavailableError("packages")
