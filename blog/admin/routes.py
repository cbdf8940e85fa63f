"""
Admin Routes

Dashboard listing and post create/edit/delete.
"""

from flask import redirect, render_template, url_for

from blog.admin import admin_bp
from blog.payload import request_data, text_field
from blog.services import create_post, delete_post, get_post_or_404, list_posts, update_post


def _post_fields():
    data = request_data()
    return text_field(data, 'title'), text_field(data, 'body')


@admin_bp.route('/dashboard')
def dashboard():
    """Admin dashboard listing every post"""
    return render_template('admin/dashboard.html', title='Admin dashboard', posts=list_posts())


@admin_bp.route('/add-post', methods=['GET'])
def add_post_page():
    return render_template('admin/add_post.html', title='Add post')


@admin_bp.route('/add-post', methods=['POST'])
def add_post():
    title, body = _post_fields()
    create_post(title, body)
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/edit-post/<int:post_id>', methods=['GET'])
def edit_post_page(post_id):
    post = get_post_or_404(post_id)
    return render_template('admin/edit_post.html', title=f'Edit post: {post.title}', post=post)


@admin_bp.route('/edit-post/<int:post_id>', methods=['PUT'])
def edit_post(post_id):
    """Update title and body, then return to the edit page"""
    title, body = _post_fields()
    update_post(post_id, title, body)
    return redirect(url_for('admin.edit_post_page', post_id=post_id))


@admin_bp.route('/delete-post/<int:post_id>', methods=['DELETE'])
def remove_post(post_id):
    delete_post(post_id)
    return redirect(url_for('admin.dashboard'))
