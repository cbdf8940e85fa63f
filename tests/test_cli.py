from blog.commands import SAMPLE_POSTS
from blog.models import Post, User


def test_create_user_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['create-user', 'alice', '--password', 'wonderland'])
    assert result.exit_code == 0, result.output
    assert 'Created user alice' in result.output

    with app.app_context():
        assert User.query.filter_by(username='alice').count() == 1


def test_create_user_command_reports_duplicates(app):
    runner = app.test_cli_runner()
    runner.invoke(args=['create-user', 'alice', '--password', 'wonderland'])
    result = runner.invoke(args=['create-user', 'alice', '--password', 'again'])
    assert result.exit_code == 1
    assert 'User already in use.' in result.output


def test_seed_posts_is_idempotent(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-posts'])
    assert f'Inserted {len(SAMPLE_POSTS)} post(s)' in result.output

    result = runner.invoke(args=['seed-posts'])
    assert 'Inserted 0 post(s)' in result.output

    with app.app_context():
        assert Post.query.count() == len(SAMPLE_POSTS)
