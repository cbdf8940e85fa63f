"""
Auth Gate

Resolves the authenticated identity from the token cookie. Nothing here
touches the database: a valid signature is the whole credential check.
"""

from flask import current_app, g, request
from flask_login import UserMixin, current_user

from blog.auth.tokens import read_token
from blog.errors import UnauthorizedError, error_response
from blog.extensions import login_manager


class TokenIdentity(UserMixin):
    """Identity carried by a verified token."""

    def __init__(self, user_id):
        self.id = user_id


@login_manager.request_loader
def load_identity_from_cookie(req):
    """Flask-Login request loader backed by the signed token cookie."""
    config = current_app.config
    user_id = read_token(
        req.cookies.get(config['TOKEN_COOKIE_NAME']),
        max_age=config['TOKEN_MAX_AGE'],
        denylist=config['TOKEN_DENYLIST'],
    )
    if user_id is None:
        return None
    g.user_id = user_id
    return TokenIdentity(user_id)


@login_manager.unauthorized_handler
def unauthorized():
    return error_response(UnauthorizedError())


def require_token():
    """before_request hook for gated blueprints.

    Returning a response here short-circuits the request before the view runs.
    """
    if request.method == 'OPTIONS':
        return None
    if not current_user.is_authenticated:
        return login_manager.unauthorized()
    return None
