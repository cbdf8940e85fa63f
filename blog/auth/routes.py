"""
Auth Routes

Login issues a signed token in an HTTP-only cookie; logout clears it. There is
no server-side session to invalidate.
"""

from http import HTTPStatus

from flask import current_app, jsonify, redirect, render_template, url_for

from blog.auth import auth_bp
from blog.auth.tokens import issue_token
from blog.errors import InvalidCredentialsError
from blog.payload import request_data, text_field
from blog.services import authenticate_user, register_user


@auth_bp.route('/admin', methods=['GET'])
def admin_login_page():
    """Admin login page"""
    return render_template('admin/index.html', title='Admin')


@auth_bp.route('/admin', methods=['POST'])
def admin_login():
    """Check credentials and set the token cookie"""
    data = request_data()
    invalid = InvalidCredentialsError()
    user = authenticate_user(
        text_field(data, 'username', invalid),
        text_field(data, 'password', invalid),
    )

    config = current_app.config
    response = redirect(url_for('admin.dashboard'))
    response.set_cookie(
        config['TOKEN_COOKIE_NAME'],
        issue_token(user.id),
        httponly=True,
        secure=config['TOKEN_COOKIE_SECURE'],
        samesite='Lax',
    )
    return response


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an admin account"""
    data = request_data()
    user = register_user(text_field(data, 'username'), text_field(data, 'password'))
    return jsonify({'message': 'User created.', 'user': user.to_dict()}), HTTPStatus.CREATED


@auth_bp.route('/logout')
def logout():
    """Clear the token cookie"""
    response = redirect(url_for('main.home'))
    response.delete_cookie(current_app.config['TOKEN_COOKIE_NAME'])
    return response
