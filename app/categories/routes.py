# package imports
from flask_smorest import Blueprint, abort
from flask.views import MethodView

# project imports
from app.libs.errors import APIError

# app imports
from .services import CategoryService
from .schemas import CategorySchema, CategoryTreeSchema

bp = Blueprint(
    "categories", __name__, description="Category operations", url_prefix="/categories"
)


@bp.route("/")
class CategoryList(MethodView):
    @bp.response(200, CategoryTreeSchema(many=True))
    def get(self):
        """Get active category hierarchy"""
        try:
            return CategoryService.get_category_tree()
        except APIError as e:
            abort(e.status_code, message=e.message)


@bp.route("/<int:category_id>")
class CategoryDetail(MethodView):
    @bp.response(200, CategorySchema)
    def get(self, category_id):
        """Get category details"""
        try:
            return CategoryService.get_category(category_id)
        except APIError as e:
            abort(e.status_code, message=e.message)
