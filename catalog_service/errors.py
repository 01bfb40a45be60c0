from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException

from catalog_service.logger import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        # Start from werkzeug's response so headers such as Allow survive
        response = e.get_response()
        response.data = current_app.json.dumps({"error": e.name.lower(), "status": e.code})
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error while serving request")
        response = jsonify(error="internal server error", status=500)
        response.status_code = 500
        return response
