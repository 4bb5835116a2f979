import logging

# package imports
from flask_smorest import Blueprint, abort
from flask.views import MethodView

# project imports
from app.libs.errors import APIError

# app imports
from .services import PackageService
from .schemas import PackageSchema, PackageQueryArgs, PackageListSchema

logger = logging.getLogger(__name__)

bp = Blueprint(
    "packages", __name__, description="Service package catalog", url_prefix="/packages"
)


@bp.route("/")
class PackageList(MethodView):
    @bp.arguments(PackageQueryArgs, location="query")
    @bp.response(200, PackageListSchema)
    def get(self, args):
        """List active packages with filters"""
        try:
            return PackageService.list_packages(args)
        except APIError as e:
            abort(e.status_code, message=e.message)


@bp.route("/<int:package_id>")
class PackageDetail(MethodView):
    @bp.response(200, PackageSchema)
    def get(self, package_id):
        """Get package details"""
        try:
            return PackageService.get_package(package_id)
        except APIError as e:
            abort(e.status_code, message=e.message)
