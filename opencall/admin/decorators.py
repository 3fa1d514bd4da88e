"""
Admin Decorator
"""

from functools import wraps
from flask import g, redirect, url_for
from flask_login import current_user
from opencall.models import find_admin_permissions


def admin_required(f):
    """Decorator to ensure the request is from a listed admin.

    - Not logged in: redirect to the login page
    - Logged in but not in the admins table: redirect to the dashboard
    - Otherwise the raw permissions string is put on ``g.admin_permissions``
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return redirect(url_for('auth.login_form'))

        permissions = find_admin_permissions(current_user.email)
        if permissions is None:
            return redirect(url_for('dashboard.phone_bank'))

        g.admin_permissions = permissions
        return f(*args, **kwargs)
    return wrapper
