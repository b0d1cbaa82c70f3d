"""
Helpers shared by the blueprints.

``get_store`` returns the document store bound to the current application;
``api_errors`` turns unexpected store failures into the generic 500 answer
the dashboard expects.
"""

from functools import wraps
from typing import Any, Callable, Tuple

from flask import Response, current_app, jsonify
from werkzeug.exceptions import HTTPException

from .store import DocumentStore

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def get_store() -> DocumentStore:
    """Document store of the current application."""
    return current_app.extensions["document_store"]


def json_message(message: str, status: int = 200) -> Tuple[Response, int]:
    """``{"message": ...}`` response with the given status code."""
    return jsonify({"message": message}), status


def api_errors(log_message: str) -> Callable:
    """Decorator for API views.

    Any exception other than an HTTP error is logged with ``log_message``
    and its traceback, the store session is rolled back and the client
    receives ``500 {"message": "Internal Server Error"}``.
    """

    def decorator(view: Callable) -> Callable:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except Exception:
                current_app.logger.exception(log_message)
                try:
                    get_store().rollback()
                except Exception:
                    current_app.logger.warning("Rollback after failed request also failed", exc_info=True)
                return json_message(INTERNAL_ERROR_MESSAGE, 500)

        return wrapper

    return decorator
