"""
Flask Blog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from blog.config import Config
from blog.extensions import db, login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = \
            'sqlite:///' + os.path.join(app.instance_path, 'blog.db')

    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.session_protection = None
    from blog.auth import gate  # noqa: F401  registers the token request loader

    from blog.errors import register_error_handlers
    from blog.middleware import configure_request_interceptors
    from blog.commands import register_commands

    configure_request_interceptors(app)
    register_error_handlers(app)
    register_commands(app)

    # Register blueprints
    from blog.auth import auth_bp
    from blog.admin import admin_bp
    from blog.main import main_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(main_bp)

    @app.context_processor
    def inject_site_metadata():
        """Default page title and description for every template."""
        return dict(
            title=app.config['SITE_TITLE'],
            description=app.config['SITE_DESCRIPTION'],
            site_title=app.config['SITE_TITLE'],
        )

    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()

    logger.info('Blog application created (%s)', config_class.__name__)
    return app


def _configure_logging(app):
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    logging.getLogger('blog').setLevel(app.config['LOG_LEVEL'])
