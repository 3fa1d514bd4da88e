"""
Admin Routes
"""

from flask import g, render_template
from flask_login import current_user
from opencall.admin import admin_bp
from opencall.admin.decorators import admin_required


@admin_bp.route('/admin')
@admin_required
def admin_panel():
    """Admin page; the template interprets the permissions string."""
    return render_template('admin/admin.html',
                           user=current_user,
                           permissions=g.admin_permissions)
