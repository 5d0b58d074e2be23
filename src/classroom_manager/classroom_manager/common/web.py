from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import AuthenticationError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "profile_id" not in session:
            return jsonify({"success": False, "message": "Vui lòng đăng nhập để tiếp tục!"}), 401
        return view(*args, **kwargs)

    return wrapper


def json_errors(action: str):
    """Translate domain errors into JSON responses.

    ``action`` names the operation in the generic 500 message.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except AuthenticationError as e:
                return jsonify({"success": False, "message": str(e)}), 401
            except DomainError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("Unhandled error during %s (%s %s)", action, request.method, request.path)
                return jsonify({"success": False, "message": f"Lỗi hệ thống khi {action}"}), 500

        return wrapper

    return decorator


def request_data() -> dict:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
