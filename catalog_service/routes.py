from flask import Blueprint, current_app, jsonify

from catalog_service.catalog import Catalog

bp = Blueprint("catalog", __name__)


def get_catalog() -> Catalog:
    return current_app.extensions["catalog"]


@bp.get("/")
def index():
    return jsonify(
        message=current_app.config["GREETING"],
        status="success",
    )


@bp.get("/health")
def health():
    return jsonify(status="healthy")


@bp.get("/products")
def list_products():
    return jsonify([p.to_dict() for p in get_catalog().all()])


@bp.get("/products/<category>")
def products_by_category(category):
    # Unknown categories are an empty listing, not a 404
    return jsonify([p.to_dict() for p in get_catalog().by_category(category)])
