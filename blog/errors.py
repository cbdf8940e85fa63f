"""
Error Taxonomy

Every failure a handler can report maps to exactly one JSON response of the
form {"message": ...}. register_error_handlers() installs that mapping at the
application boundary, so an exception escaping a view always produces a
response instead of a hung request.
"""

import logging
from http import HTTPStatus

from flask import jsonify
from werkzeug.exceptions import HTTPException

from blog.extensions import db

logger = logging.getLogger(__name__)


class BlogError(Exception):
    """Base class for errors rendered as a JSON message."""
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    message = 'Internal Server error.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'message': self.message}


class UnauthorizedError(BlogError):
    status = HTTPStatus.UNAUTHORIZED
    message = 'Unauthorized.'


class InvalidCredentialsError(BlogError):
    """Login failure; identical for unknown users and wrong passwords."""
    status = HTTPStatus.UNAUTHORIZED
    message = 'Invalid credentials.'


class DuplicateUserError(BlogError):
    status = HTTPStatus.CONFLICT
    message = 'User already in use.'


class NotFoundError(BlogError):
    status = HTTPStatus.NOT_FOUND
    message = 'Not found.'


class ValidationError(BlogError):
    status = HTTPStatus.BAD_REQUEST
    message = 'Invalid request.'


class InternalError(BlogError):
    pass


def error_response(error):
    """Build the (response, status) pair for a BlogError."""
    return jsonify(error.to_dict()), error.status


def register_error_handlers(app):
    """Map every exception reaching the app boundary to a single response."""

    @app.errorhandler(BlogError)
    def handle_blog_error(error):
        return error_response(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception('Unhandled error: %s', error)
        return error_response(InternalError())
