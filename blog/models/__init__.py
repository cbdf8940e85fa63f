"""
Models Package

Exports all models for easy importing.
"""

from blog.models.user import User
from blog.models.post import Post

__all__ = ['User', 'Post']
