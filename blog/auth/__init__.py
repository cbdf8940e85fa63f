"""
Auth Blueprint

Admin sign-in, registration and sign-out. The signed token cookie set here is
what the Auth Gate verifies on the admin content routes.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blog.auth import routes  # noqa: E402, F401
