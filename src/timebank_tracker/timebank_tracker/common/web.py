from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .datetime_utils import now_local

logger = logging.getLogger(__name__)


def current_user_id() -> int:
    """User id placed in the session by the (external) authentication layer."""
    user_id = session.get("user_id")
    if user_id is None:
        raise AuthenticationError("Unauthorized")
    return int(user_id)


def json_body() -> dict:
    """Request body when it is a JSON object, otherwise an empty dict."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def api_view(failure_message: str):
    """Map domain errors of a JSON view onto HTTP status codes.

    AuthenticationError -> 401, ValidationError -> 400, NotFoundError -> 404,
    anything else is logged and answered with 500 and ``failure_message``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except AuthenticationError as e:
                return jsonify({"error": str(e)}), 401
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return jsonify({"error": failure_message}), 500

        return wrapper

    return decorator


def year_month_args() -> tuple[int, int]:
    """``?year=&month=`` query arguments, defaulting to the current month."""
    today = now_local().date()
    try:
        year = int(request.args.get("year") or today.year)
        month = int(request.args.get("month") or today.month)
    except ValueError:
        raise ValidationError("Invalid year or month")
    return year, month
