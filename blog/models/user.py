"""
User Model
"""

from blog.extensions import db


class User(db.Model):
    """Admin account able to sign in and manage posts"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    def to_dict(self):
        """Public representation; never includes the password hash."""
        return {'id': self.id, 'username': self.username}

    def __repr__(self):
        return f'<User {self.username}>'
