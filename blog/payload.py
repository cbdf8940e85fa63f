"""
Request payload helper

Admin and public forms post url-encoded bodies; API clients may send JSON.
"""

from flask import request

from blog.errors import ValidationError


def request_data():
    """Body fields from a JSON object, falling back to the form."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def text_field(data, name, error=None):
    """String value of ``name`` in ``data``, '' when absent.

    JSON bodies can carry numbers, lists or null; those raise ``error``
    (a ValidationError naming the field by default).
    """
    value = data.get(name, '')
    if isinstance(value, str):
        return value
    raise error or ValidationError(f'Field {name!r} must be a string.')
