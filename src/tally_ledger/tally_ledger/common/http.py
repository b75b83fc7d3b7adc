from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import current_app, g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError
from ..users.tokens import TokenClaims, TokenSigner
from .datetime_utils import DateRange, resolve_range

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def json_endpoint(view):
    """Map domain errors to JSON error bodies; anything else is a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except AuthorizationError as e:
            return json_error(str(e), 403)
        except DomainError as e:
            return json_error(str(e), 400)
        except Exception as e:
            logger.exception("Unhandled error on %s %s", request.method, request.path)
            if bool(current_app.config.get("DEBUG", False)):
                return json_error(f"Internal error: {e}", 500)
            return json_error("Internal error", 500)

    return wrapper


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header[len("Bearer "):].strip() or None
    return None


def auth_required(tokens: TokenSigner, role: Optional[Role] = None):
    """Verify the bearer token and stash its claims on ``g.claims``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token()
            if not token:
                return json_error("Missing token", 401)
            try:
                claims = tokens.verify(token)
            except AuthenticationError as e:
                return json_error(str(e), 401)
            if role is not None and claims.role != role:
                return json_error("Forbidden", 403)
            g.claims = claims
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_claims() -> TokenClaims:
    return g.claims


def request_range() -> DateRange:
    return resolve_range(request.args.get("start"), request.args.get("end"))


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
