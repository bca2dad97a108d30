from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import ConfigurationError, DomainError, ValidationError

logger = logging.getLogger(__name__)


def json_errors(view):
    """Turn domain errors into {ok: false, error} JSON; messages pass through as-is."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        except ConfigurationError as e:
            logger.error("Configuration problem in %s: %s", view.__name__, e)
            return jsonify({"ok": False, "error": str(e)}), 500
        except DomainError as e:
            return jsonify({"ok": False, "error": str(e)}), 422
        except Exception:
            logger.exception("Unexpected error in %s", view.__name__)
            return jsonify({"ok": False, "error": "Unexpected server error"}), 500

    return wrapper
