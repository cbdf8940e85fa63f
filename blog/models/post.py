"""
Post Model
"""

from datetime import datetime, timezone

from blog.extensions import db


def utcnow():
    """Naive UTC timestamp, as stored by the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Post(db.Model):
    """Blog post"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f'<Post {self.id} {self.title!r}>'
