import logging

from flask_smorest import Blueprint
from flask.views import MethodView
from flask import current_app

from .schemas import SearchQueryArgs, SearchResponseSchema
from .services import SearchService, SearchState

logger = logging.getLogger(__name__)


bp = Blueprint(
    "search",
    __name__,
    description="Unified search across packages, plugins and categories",
    url_prefix="/search",
)


@bp.route("/")
class GlobalSearch(MethodView):
    @bp.arguments(SearchQueryArgs, location="query")
    @bp.response(200, SearchResponseSchema)
    @bp.alt_response(
        400, schema=SearchResponseSchema, description="Missing or invalid search query"
    )
    def get(self, args):
        """
        Unified search endpoint.

        - `q` is matched against package titles, plugin names, category
          names, their descriptions and category names.
        - Always answers with all result lists present. A missing `q` is a
          400 with empty lists; a failure while scoring is still a 200 with
          empty lists and an `error` message.
        """
        service = SearchService.from_app(current_app._get_current_object())
        response = service.search(args.get("q"))

        if response.state is SearchState.FAILED:
            return response, 400
        return response
