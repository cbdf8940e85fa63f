"""
Admin Blueprint

Post management. Every route in this blueprint sits behind the Auth Gate.
"""

from flask import Blueprint

from blog.auth.gate import require_token

admin_bp = Blueprint('admin', __name__)
admin_bp.before_request(require_token)

from blog.admin import routes  # noqa: E402, F401
