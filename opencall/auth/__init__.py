"""
Auth Blueprint

Volunteer registration, login and logout.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from opencall.auth import routes  # noqa: E402, F401
