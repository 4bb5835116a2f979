import logging

# package imports
from flask_smorest import Blueprint, abort
from flask.views import MethodView

# project imports
from app.libs.errors import APIError

# app imports
from .services import PluginService
from .schemas import PluginSchema, PluginQueryArgs, PluginListSchema

logger = logging.getLogger(__name__)

bp = Blueprint(
    "plugins", __name__, description="Add-on plugin catalog", url_prefix="/plugins"
)


@bp.route("/")
class PluginList(MethodView):
    @bp.arguments(PluginQueryArgs, location="query")
    @bp.response(200, PluginListSchema)
    def get(self, args):
        """List active plugins with filters"""
        try:
            return PluginService.list_plugins(args)
        except APIError as e:
            abort(e.status_code, message=e.message)


@bp.route("/<int:plugin_id>")
class PluginDetail(MethodView):
    @bp.response(200, PluginSchema)
    def get(self, plugin_id):
        """Get plugin details"""
        try:
            return PluginService.get_plugin(plugin_id)
        except APIError as e:
            abort(e.status_code, message=e.message)
