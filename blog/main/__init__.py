"""
Main Blueprint

Public pages: home listing, single post, search and static pages.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from blog.main import routes  # noqa: E402, F401
