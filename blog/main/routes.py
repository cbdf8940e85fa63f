"""
Main Routes
"""

from flask import current_app, render_template, request

from blog.main import main_bp
from blog.payload import request_data, text_field
from blog.services import get_post_or_404, paginate_posts, search_posts
from blog.services.posts import parse_page


@main_bp.route('/')
def home():
    """Home page with the newest posts, one page at a time"""
    page = paginate_posts(
        parse_page(request.args.get('page')),
        per_page=current_app.config['POSTS_PER_PAGE'],
    )
    return render_template(
        'index.html',
        posts=page.posts,
        current=page.current,
        next_page=page.next_page,
        current_route='/',
    )


@main_bp.route('/post/<int:post_id>')
def post(post_id):
    """Single post view"""
    item = get_post_or_404(post_id)
    return render_template(
        'post.html',
        title=item.title,
        post=item,
        current_route=f'/post/{post_id}',
    )


@main_bp.route('/search', methods=['POST'])
def search():
    """Search posts by title or body"""
    term = text_field(request_data(), 'searchTerm')
    results = search_posts(term, limit=current_app.config['SEARCH_RESULT_LIMIT'])
    return render_template(
        'search.html',
        title='Search',
        posts=results,
        search_term=term,
        current_route='/search',
    )


@main_bp.route('/about')
def about():
    return render_template('about.html', title='About', current_route='/about')


@main_bp.route('/contact')
def contact():
    return render_template('contact.html', title='Contact', current_route='/contact')
