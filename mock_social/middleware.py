"""
WSGI middleware applied in front of the Flask router.
"""
import logging
import re
import time

from flask import g, request


logger = logging.getLogger("mock_social.requests")

_LEGACY_SHOW_PATH = re.compile(r"^/product/(?P<resource>[^/]+)/(?P<id>[^/]+)/show/?$")


def rewrite_path(path: str) -> str:
    """Map public paths onto the routed ones.

    ``/api/<rest>`` becomes ``/<rest>`` and
    ``/product/<resource>/<id>/show`` becomes ``/<resource>/<id>``.
    """
    if path == "/api":
        return "/"
    if path.startswith("/api/"):
        return path[len("/api"):]

    match = _LEGACY_SHOW_PATH.match(path)
    if match:
        return f"/{match.group('resource')}/{match.group('id')}"
    return path


class PathRewriteMiddleware:
    def __init__(self, wsgi_app):
        self.wsgi_app = wsgi_app

    def __call__(self, environ, start_response):
        original = environ.get("PATH_INFO", "") or "/"
        rewritten = rewrite_path(original)
        if rewritten != original:
            environ["PATH_INFO"] = rewritten
            environ["mock_social.original_path"] = original
        return self.wsgi_app(environ, start_response)


def register_request_logging(app):
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.get("request_started")
        duration = time.perf_counter() - started if started is not None else 0.0
        logger.info(
            "%s %s %s %.3fs",
            request.method,
            request.environ.get("mock_social.original_path", request.path),
            response.status_code,
            duration,
        )
        return response
