import jwt
from functools import wraps
from flask import request, g, current_app
from flask_login import current_user
from datetime import datetime, timezone

import errors
from models import db, User


def is_admin_email(email):
    return (email or "").lower() in current_app.config.get("ADMIN_EMAILS", [])


def create_access_token(user):
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user.id,
        "email": user.email,
        "exp": now + current_app.config["JWT_ACCESS_TOKEN_EXPIRE"],
        "iat": now
    }
    return jwt.encode(
        payload,
        current_app.config["JWT_SECRET_KEY"],
        algorithm="HS256"
    )


def decode_access_token(token):
    """Return the token payload; raises ApiError for expired or invalid tokens."""
    try:
        return jwt.decode(
            token,
            current_app.config["JWT_SECRET_KEY"],
            algorithms=["HS256"]
        )
    except jwt.ExpiredSignatureError:
        raise errors.token_expired()
    except jwt.InvalidTokenError:
        raise errors.unauthorized("Invalid token")


def _user_from_request():
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        payload = decode_access_token(auth.split(" ", 1)[1].strip())
        user = db.session.get(User, payload.get("user_id"))
        if not user:
            raise errors.unauthorized("Invalid token")
        return user

    # Fall back to the flask-login session cookie
    if current_user and current_user.is_authenticated:
        return current_user._get_current_object()
    raise errors.unauthorized()


def jwt_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        g.current_user = _user_from_request()
        return fn(*args, **kwargs)
    return wrapper


def approved_required(fn):
    @wraps(fn)
    @jwt_required
    def wrapper(*args, **kwargs):
        if not g.current_user.is_approved:
            raise errors.account_pending()
        return fn(*args, **kwargs)
    return wrapper


def admin_required(fn):
    @wraps(fn)
    @jwt_required
    def wrapper(*args, **kwargs):
        if not g.current_user.is_admin:
            raise errors.forbidden("Admin access required")
        return fn(*args, **kwargs)
    return wrapper
