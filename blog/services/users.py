"""
User Services

Registration and credential checks for admin accounts.
"""

import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from blog.errors import DuplicateUserError, InvalidCredentialsError, ValidationError
from blog.extensions import db
from blog.models import User

logger = logging.getLogger(__name__)


def hash_password(password):
    config = current_app.config
    return generate_password_hash(
        password,
        method=config['PASSWORD_HASH_METHOD'],
        salt_length=config['PASSWORD_SALT_LENGTH'],
    )


def register_user(username, password):
    """Create a user, relying on the unique constraint to detect duplicates.

    Raises DuplicateUserError when the username is taken. Any other database
    failure propagates to the boundary error handler.
    """
    if not username or not password:
        raise ValidationError('Username and password are required.')

    user = User(username=username, password_hash=hash_password(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.info('Registration refused, username %r already in use', username)
        raise DuplicateUserError()

    logger.info('Registered user %r', username)
    return user


def authenticate_user(username, password):
    """Return the user matching the credentials or raise InvalidCredentialsError.

    Unknown usernames and wrong passwords fail the same way.
    """
    user = User.query.filter_by(username=username).first() if username else None
    if user is None or not check_password_hash(user.password_hash, password or ''):
        logger.warning('Failed login for %r', username)
        raise InvalidCredentialsError()

    logger.info('User %r logged in', username)
    return user
