"""
Product catalog service.

`create_app` builds the Flask application around a read-only Catalog that is
constructed once and handed to the request handlers through
``app.extensions["catalog"]``.
"""
from typing import Optional

from flask import Flask, request

from catalog_service.catalog import (
    CATEGORIES,
    Catalog,
    InvalidProductError,
    Product,
    default_catalog,
)
from catalog_service.config import Settings
from catalog_service.errors import register_error_handlers
from catalog_service.logger import get_logger, setup_logging
from catalog_service.routes import bp

__all__ = [
    "CATEGORIES",
    "Catalog",
    "InvalidProductError",
    "Product",
    "Settings",
    "create_app",
    "default_catalog",
]

logger = get_logger(__name__)


def create_app(catalog: Optional[Catalog] = None, settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()
    setup_logging(settings.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(settings)
    # Let Flask's own logger go through the root handler
    app.logger.propagate = True
    # Products serialize as id, name, category, price, description
    app.json.sort_keys = False

    app.extensions["catalog"] = default_catalog() if catalog is None else catalog
    app.register_blueprint(bp)
    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        logger.debug("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    logger.info(
        "Catalog service ready with %d products", len(app.extensions["catalog"])
    )
    return app
