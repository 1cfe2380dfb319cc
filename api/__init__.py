from flask import Flask
from flasgger import Swagger
from flask_cors import CORS
import logging

from .config import get_config
from .errors import register_error_handlers
from models.memory_storage import MemoryStorage

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0.0",
    "info": {
        "title": "Bookstore GraphQL API",
        "version": "1.0.0",
        "description": "GraphQL API for managing books and their authors.",
    },
    "basePath": "/",
    "schemes": ["http"],
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None, storage: MemoryStorage | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    The app owns its MemoryStorage; pass one in to share or pre-fill a store,
    otherwise a fresh store is seeded from SEED_FILE or the built-in sample data.
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    from .resolvers import DELETE_POLICIES

    if app.config.get("AUTHOR_DELETE_POLICY") not in DELETE_POLICIES:
        raise ValueError(
            f"AUTHOR_DELETE_POLICY must be one of {', '.join(DELETE_POLICIES)}, "
            f"got {app.config.get('AUTHOR_DELETE_POLICY')!r}"
        )

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if storage is None:
        storage = MemoryStorage()
        if app.config.get("SEED_FILE"):
            storage.load_file(app.config["SEED_FILE"])
        else:
            storage.reload()
    app.extensions["storage"] = storage

    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    register_error_handlers(app)

    from .health import bp as health_bp
    from .graphql_view import bp as graphql_bp

    app.register_blueprint(health_bp, url_prefix="/api/v1")
    app.register_blueprint(graphql_bp)

    @app.route("/")
    def root():
        return {
            "message": "Welcome to Bookstore GraphQL API",
            "docs": "/apidocs/",
            "graphql": "/graphql",
            "health": "/api/v1/health",
        }, 200

    return app
