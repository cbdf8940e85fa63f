from flask import g, request
from sqlalchemy import event

from blog.auth.gate import load_identity_from_cookie
from blog.auth.tokens import TokenDenylist, issue_token
from blog.extensions import db
from blog.models import User

GATED = [
    ('get', '/dashboard'),
    ('get', '/add-post'),
    ('post', '/add-post'),
    ('get', '/edit-post/1'),
    ('put', '/edit-post/1'),
    ('delete', '/delete-post/1'),
]


def test_register_creates_user(client, app):
    r = client.post('/register', data={'username': 'writer', 'password': 's3cret'})
    assert r.status_code == 201
    data = r.get_json()
    assert data['message'] == 'User created.'
    assert data['user']['username'] == 'writer'
    assert 'password_hash' not in data['user']

    with app.app_context():
        user = User.query.filter_by(username='writer').one()
        assert user.password_hash != 's3cret'


def test_register_accepts_json(client):
    r = client.post('/register', json={'username': 'jsonuser', 'password': 'pw'})
    assert r.status_code == 201


def test_register_duplicate_is_conflict_once(client):
    first = client.post('/register', data={'username': 'dup', 'password': 'a'})
    second = client.post('/register', data={'username': 'dup', 'password': 'b'})
    assert first.status_code == 201
    assert second.status_code == 409
    assert second.get_json() == {'message': 'User already in use.'}


def test_register_requires_username_and_password(client):
    r = client.post('/register', data={'username': 'nopass'})
    assert r.status_code == 400
    assert r.get_json() == {'message': 'Username and password are required.'}


def test_login_page_renders(client):
    r = client.get('/admin')
    assert r.status_code == 200
    assert 'Sign In' in r.get_data(as_text=True)


def test_login_sets_http_only_cookie_and_redirects(client, registered_user):
    r = client.post('/admin', data=registered_user)
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/dashboard')
    cookie = r.headers['Set-Cookie']
    assert cookie.startswith('token=')
    assert 'HttpOnly' in cookie

    r = client.get('/dashboard')
    assert r.status_code == 200


def test_login_failures_are_indistinguishable(client, registered_user):
    wrong_password = client.post('/admin', data={'username': registered_user['username'],
                                                 'password': 'nope'})
    unknown_user = client.post('/admin', data={'username': 'ghost', 'password': 'nope'})
    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json() == {'message': 'Invalid credentials.'}
    assert 'Set-Cookie' not in wrong_password.headers


def test_login_with_missing_fields_is_invalid_credentials(client):
    r = client.post('/admin', data={})
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Invalid credentials.'}


def test_gated_routes_reject_missing_cookie(client):
    for method, path in GATED:
        r = getattr(client, method)(path)
        assert r.status_code == 401, path
        assert r.get_json() == {'message': 'Unauthorized.'}


def test_gate_rejection_does_not_touch_database(app, client):
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    with app.app_context():
        engine = db.engine
    event.listen(engine, 'before_cursor_execute', record)
    try:
        client.set_cookie('token', 'not-a-real-token')
        for method, path in GATED:
            assert getattr(client, method)(path).status_code == 401
    finally:
        event.remove(engine, 'before_cursor_execute', record)
    assert statements == []


def test_token_signed_with_other_secret_is_rejected(client):
    client.set_cookie('token', issue_token(1, secret_key='someone-elses-secret'))
    r = client.get('/dashboard')
    assert r.status_code == 401


def test_expired_token_is_rejected(app, auth_client):
    app.config['TOKEN_MAX_AGE'] = -1
    r = auth_client.get('/dashboard')
    assert r.status_code == 401


def test_revoked_token_is_rejected(app, auth_client):
    class DenyAll(TokenDenylist):
        def is_revoked(self, token):
            return True

    assert auth_client.get('/dashboard').status_code == 200
    app.config['TOKEN_DENYLIST'] = DenyAll()
    assert auth_client.get('/dashboard').status_code == 401


def test_gate_attaches_user_id(app):
    with app.app_context():
        token = issue_token(7)
    with app.test_request_context('/dashboard', headers={'Cookie': f'token={token}'}):
        identity = load_identity_from_cookie(request)
        assert identity.id == 7
        assert identity.is_authenticated
        assert g.user_id == 7


def test_logout_clears_cookie(auth_client):
    r = auth_client.get('/logout')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/')
    assert auth_client.get('/dashboard').status_code == 401


def test_logout_without_cookie_still_redirects(client):
    r = client.get('/logout')
    assert r.status_code == 302


def test_login_with_non_string_fields_is_invalid_credentials(client, registered_user):
    for payload in ({'username': registered_user['username'], 'password': 1},
                    {'username': None, 'password': 'x'}):
        r = client.post('/admin', json=payload)
        assert r.status_code == 401
        assert r.get_json() == {'message': 'Invalid credentials.'}


def test_register_rejects_non_string_fields(client):
    r = client.post('/register', json={'username': 'numbers', 'password': 12345})
    assert r.status_code == 400
    assert r.get_json() == {'message': "Field 'password' must be a string."}
