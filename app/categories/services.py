# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError

# project imports
from app.libs.session import session_scope
from app.libs.errors import NotFoundError, CatalogUnavailableError

# app imports
from .models import Category

logger = logging.getLogger(__name__)


class CategoryService:
    @staticmethod
    def get_category_tree():
        """Get hierarchical category structure"""
        try:
            with session_scope() as session:
                root_categories = (
                    session.query(Category)
                    .filter(Category.parent_id.is_(None), Category.is_active.is_(True))
                    .order_by(Category.name)
                    .all()
                )

                def build_tree(category):
                    return {
                        "id": category.id,
                        "name": category.name,
                        "slug": category.slug,
                        "description": category.description,
                        "children": [
                            build_tree(child)
                            for child in sorted(
                                [c for c in category.children if c.is_active],
                                key=lambda x: x.name,
                            )
                        ],
                    }

                return [build_tree(cat) for cat in root_categories]
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching category tree: {str(e)}")
            raise CatalogUnavailableError("categories")

    @staticmethod
    def get_category(category_id):
        """Get a single active category"""
        try:
            with session_scope() as session:
                category = session.get(Category, category_id)
                if not category or not category.is_active:
                    raise NotFoundError("Category not found")
                return category
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching category {category_id}: {str(e)}")
            raise CatalogUnavailableError("categories")

    @staticmethod
    def get_searchable_categories():
        """All active categories, flattened, as plain dictionaries"""
        try:
            with session_scope() as session:
                categories = (
                    session.query(Category)
                    .filter(Category.is_active.is_(True))
                    .order_by(Category.name)
                    .all()
                )
                return [category.to_dict() for category in categories]
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching searchable categories: {str(e)}")
            raise CatalogUnavailableError("categories")
