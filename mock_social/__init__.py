from flask import Flask

from mock_social.config import Config
from mock_social.db import store
from mock_social.extensions.extensions import cors, ma
from mock_social.extensions.minio_client import parse_storage_url
from mock_social.logging_config import setup_logging
from mock_social.middleware import PathRewriteMiddleware, register_request_logging
from mock_social.routes.post_routes import post_bp
from mock_social.routes.resource_routes import resource_bp
from mock_social.routes.user_routes import user_bp


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_FILE"])

    try:
        parse_storage_url(
            app.config["MEDIA_STORAGE_URL"],
            app.config.get("MEDIA_PUBLIC_BASE_URL", ""),
        )
    except ValueError as e:
        raise RuntimeError(f"Invalid cloud storage configuration: {e}") from e

    store.init_app(app)
    ma.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ALLOWED_ORIGINS"],
        expose_headers=["X-Total-Count"],
    )

    app.wsgi_app = PathRewriteMiddleware(app.wsgi_app)
    register_request_logging(app)

    app.register_blueprint(user_bp)
    app.register_blueprint(post_bp)
    app.register_blueprint(resource_bp)

    return app
