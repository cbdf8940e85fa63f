"""
Services Package

Exports all services for easy importing.
"""

from blog.services.posts import (
    sanitize_search_term, paginate_posts, search_posts, list_posts,
    get_post_or_404, create_post, update_post, delete_post,
)
from blog.services.users import register_user, authenticate_user

__all__ = [
    'sanitize_search_term',
    'paginate_posts',
    'search_posts',
    'list_posts',
    'get_post_or_404',
    'create_post',
    'update_post',
    'delete_post',
    'register_user',
    'authenticate_user',
]
