from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app, jsonify

from .extensions import login_manager

ALGORITHM = "HS256"


def issue_token(user) -> str:
    expires = datetime.now(timezone.utc) + timedelta(days=current_app.config["JWT_EXPIRES_DAYS"])
    payload = {"sub": str(user.id), "exp": expires}
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=ALGORITHM)


def user_id_from_header(header):
    """Return the user id carried by a ``Bearer`` header, or None for anything unusable."""
    if not header or not header.startswith("Bearer "):
        return None
    token = header[len("Bearer "):].strip()
    try:
        payload = jwt.decode(token, current_app.config["JWT_SECRET"], algorithms=[ALGORITHM])
        return int(payload["sub"])
    except jwt.InvalidTokenError as exc:
        current_app.logger.debug("Rejected bearer token: %s", exc)
    except (KeyError, TypeError, ValueError):
        current_app.logger.debug("Rejected bearer token: bad subject")
    return None


@login_manager.unauthorized_handler
def unauthorized():
    # expired, malformed and missing tokens all look the same to the caller
    return jsonify({"error": "Invalid token"}), 401
