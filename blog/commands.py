"""
CLI Commands

    flask create-user USERNAME      create an admin account
    flask seed-posts                insert the sample posts
"""

import click

from blog.errors import DuplicateUserError, ValidationError
from blog.models import Post
from blog.services import create_post, register_user

SAMPLE_POSTS = [
    ('Building APIs with Flask',
     'Learn how to use Flask to build RESTful APIs with blueprints and JSON responses.'),
    ('Deployment of Flask applications',
     'Understand the different ways to deploy your Flask applications, including on-premises, '
     'cloud, and container environments...'),
    ('Authentication and Authorization in Flask',
     'Learn how to add authentication and authorization to your Flask web applications using '
     'Flask-Login or signed tokens.'),
    ('Understand how to work with SQLAlchemy',
     'Understand how to work with SQLAlchemy, an Object Relational Mapper, in Flask applications.'),
    ('Build real-time, event-driven applications in Python',
     'Learn how to use websockets to build real-time, event-driven applications in Python.'),
    ('Discover how to use Jinja templates',
     'Discover how to use Jinja, the template engine behind Flask, to build web pages.'),
    ('Asynchronous Programming with Python',
     'Explore asyncio and how it allows for non-blocking I/O operations.'),
    ('Learn the basics of WSGI and its architecture',
     'Learn the basics of WSGI, how it works, and why every Python web framework speaks it.'),
    ('Limiting Network Traffic',
     'Learn how to limit network traffic.'),
    ('Learn request logging for Flask',
     'Learn request logging.'),
]


def register_commands(app):
    """Attach the maintenance commands to ``app.cli``."""

    @app.cli.command('create-user')
    @click.argument('username')
    @click.password_option()
    def create_user_command(username, password):
        """Create an admin user."""
        try:
            user = register_user(username, password)
        except (DuplicateUserError, ValidationError) as exc:
            raise click.ClickException(exc.message)
        click.echo(f'Created user {user.username} (id {user.id})')

    @app.cli.command('seed-posts')
    def seed_posts_command():
        """Insert the sample posts that are not present yet."""
        existing = {title for (title,) in Post.query.with_entities(Post.title)}
        created = 0
        for title, body in SAMPLE_POSTS:
            if title in existing:
                continue
            create_post(title, body)
            created += 1
        click.echo(f'Inserted {created} post(s)')
