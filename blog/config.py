"""
Configuration settings for the blog and its admin panel
"""
import os


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name):
    value = os.environ.get(name)
    return int(value) if value else None


class Config:
    """Flask application configuration"""

    # Flask secret key (CHANGE THIS IN PRODUCTION!)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration; None means a SQLite file in the instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Signed auth token stored in an HTTP-only cookie
    TOKEN_SECRET_KEY = os.environ.get('JWT_SECRET') or SECRET_KEY
    TOKEN_COOKIE_NAME = 'token'
    TOKEN_COOKIE_SECURE = _env_flag('TOKEN_COOKIE_SECURE')
    TOKEN_MAX_AGE = _env_int('TOKEN_MAX_AGE')
    # blog.auth.tokens.TokenDenylist subclass instance, or None for no revocation
    TOKEN_DENYLIST = None

    # Password hashing
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'
    PASSWORD_SALT_LENGTH = 16

    # Content settings
    POSTS_PER_PAGE = 6
    SEARCH_RESULT_LIMIT = None
    SITE_TITLE = 'Flask Blog'
    SITE_DESCRIPTION = 'A simple blog created with Flask and SQLAlchemy.'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    REQUEST_LOGGING = os.environ.get('APP_ENV') == 'development'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    TOKEN_SECRET_KEY = 'test-token-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    TOKEN_MAX_AGE = None
    REQUEST_LOGGING = False
