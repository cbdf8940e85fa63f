"""
Post Services

Listing, pagination, search and CRUD helpers for blog posts.
"""

import logging
import re
from dataclasses import dataclass

from sqlalchemy import or_

from blog.errors import NotFoundError
from blog.extensions import db
from blog.models import Post
from blog.models.post import utcnow

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r'[^a-zA-Z0-9]')

# Largest value SQLite accepts for an id or an OFFSET
MAX_SQL_INTEGER = 2 ** 63 - 1


@dataclass
class PostPage:
    """One page of the public listing."""
    posts: list
    current: int
    next_page: int | None
    total: int

    @property
    def has_next_page(self):
        return self.next_page is not None


def parse_page(raw):
    """Page number from a query string value; anything invalid is page 1."""
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page > 0 else 1


def paginate_posts(page=1, per_page=6):
    """Newest posts first, ``per_page`` at a time.

    A page whose offset cannot be expressed in SQL is simply empty.
    """
    if (page - 1) * per_page > MAX_SQL_INTEGER:
        return PostPage(posts=[], current=page, next_page=None, total=Post.query.count())
    pagination = Post.query.order_by(Post.created_at.desc(), Post.id.desc()) \
        .paginate(page=page, per_page=per_page, error_out=False)
    return PostPage(
        posts=pagination.items,
        current=page,
        next_page=pagination.next_num if pagination.has_next else None,
        total=pagination.total,
    )


def sanitize_search_term(term):
    """Drop every character outside [a-zA-Z0-9]."""
    return _NON_ALPHANUMERIC.sub('', term or '')


def search_posts(term, limit=None):
    """Case-insensitive substring match on title or body.

    An empty (or fully stripped) term matches every post.
    """
    needle = f'%{sanitize_search_term(term)}%'
    query = Post.query.filter(or_(Post.title.ilike(needle), Post.body.ilike(needle))) \
        .order_by(Post.id)
    if limit:
        query = query.limit(limit)
    return query.all()


def list_posts():
    return Post.query.order_by(Post.id).all()


def get_post_or_404(post_id):
    if post_id > MAX_SQL_INTEGER:
        raise NotFoundError()
    post = db.session.get(Post, post_id)
    if post is None:
        raise NotFoundError()
    return post


def create_post(title, body):
    post = Post(title=title, body=body)
    db.session.add(post)
    db.session.commit()
    logger.info('Created post %s', post.id)
    return post


def update_post(post_id, title, body):
    """Replace title and body and refresh updated_at."""
    post = get_post_or_404(post_id)
    post.title = title
    post.body = body
    post.updated_at = utcnow()
    db.session.commit()
    logger.info('Updated post %s', post_id)
    return post


def delete_post(post_id):
    """Delete by id; a missing post is a no-op."""
    if post_id > MAX_SQL_INTEGER:
        return 0
    deleted = Post.query.filter_by(id=post_id).delete()
    db.session.commit()
    logger.info('Deleted post %s (%d row(s))', post_id, deleted)
    return deleted
