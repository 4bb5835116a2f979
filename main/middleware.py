import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        started = time.time()
        logger.info(
            f"Incoming request: {environ['REQUEST_METHOD']} {environ['PATH_INFO']}"
            + (f"?{environ['QUERY_STRING']}" if environ.get("QUERY_STRING") else "")
        )

        def logging_start_response(status, headers, exc_info=None):
            elapsed = round((time.time() - started) * 1000, 2)
            logger.info(f"Completed {environ['PATH_INFO']} with {status} in {elapsed}ms")
            return start_response(status, headers, exc_info)

        # Make sure to pass the request through
        return self.app(environ, logging_start_response)
