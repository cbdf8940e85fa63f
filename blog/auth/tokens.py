"""
Signed Auth Tokens

Tokens are stateless: a URL-safe signed payload {"userId": <id>} plus the
issuance timestamp. Validity is decided by the signature (and TOKEN_MAX_AGE
when configured). Revocation is opt-in through a TOKEN_DENYLIST object.
"""

import logging

from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

logger = logging.getLogger(__name__)

TOKEN_SALT = 'auth-token'


class TokenDenylist:
    """Interface for token revocation. The default revokes nothing."""

    def is_revoked(self, token):
        return False


def _serializer(secret_key=None):
    secret_key = secret_key or current_app.config['TOKEN_SECRET_KEY']
    return URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)


def issue_token(user_id, secret_key=None):
    """Sign a token carrying the user's id."""
    return _serializer(secret_key).dumps({'userId': user_id})


def read_token(token, secret_key=None, max_age=None, denylist=None):
    """Return the userId embedded in ``token`` or None if it is unusable.

    A token is rejected when its signature does not verify, when it is older
    than ``max_age`` seconds, when its payload has no userId, or when the
    denylist reports it as revoked.
    """
    if not token:
        return None
    try:
        payload = _serializer(secret_key).loads(token, max_age=max_age)
    except SignatureExpired:
        logger.info('Rejected auth token: expired')
        return None
    except BadSignature:
        logger.info('Rejected auth token: bad signature')
        return None

    if not isinstance(payload, dict) or payload.get('userId') is None:
        logger.info('Rejected auth token: missing userId claim')
        return None
    if denylist is not None and denylist.is_revoked(token):
        logger.info('Rejected auth token: revoked')
        return None
    return payload['userId']
