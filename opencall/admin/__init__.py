"""
Admin Blueprint

Admin access is an allowlist lookup on the logged-in volunteer's email.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from opencall.admin import routes  # noqa: E402, F401
