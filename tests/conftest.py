from datetime import timedelta

import pytest

from blog import create_app
from blog.config import TestConfig
from blog.extensions import db
from blog.models import Post
from blog.models.post import utcnow

CREDENTIALS = {'username': 'admin', 'password': 'correct horse'}


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def registered_user(client):
    r = client.post('/register', data=CREDENTIALS)
    assert r.status_code == 201
    return dict(CREDENTIALS)


@pytest.fixture()
def auth_client(client, registered_user):
    r = client.post('/admin', data=registered_user)
    assert r.status_code == 302
    return client


@pytest.fixture()
def make_posts(app):
    """Insert posts and return their ids; later posts are newer."""
    def _make(count, prefix='Post'):
        base = utcnow()
        ids = []
        with app.app_context():
            for i in range(count):
                stamp = base + timedelta(seconds=i)
                post = Post(title=f'{prefix} {i}', body=f'Body of {prefix.lower()} {i}',
                            created_at=stamp, updated_at=stamp)
                db.session.add(post)
                db.session.flush()
                ids.append(post.id)
            db.session.commit()
        return ids
    return _make
