"""
Flask Blog entry point

Builds the blog from the environment-driven Config; point a WSGI server at
``app:app``, or run this file for the development server. Maintenance
commands are available through ``flask --app app create-user`` and
``flask --app app seed-posts``.
"""

from blog import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
