"""
Flask Extensions

Authentication is stateless: Flask-Login never writes to the session, the
identity is resolved from the signed token cookie on every request.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager resolving the current user from the token cookie
login_manager = LoginManager()
