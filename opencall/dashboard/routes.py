"""
Dashboard Routes

Home page and the phone-banking dashboard placeholder.
"""

from flask import render_template
from flask_login import login_required, current_user
from opencall.dashboard import dashboard_bp

# The whole /pb tree is gated, whatever the method
PB_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


@dashboard_bp.route('/')
def index():
    """Public home page"""
    return render_template('index.html')


@dashboard_bp.route('/pb', methods=PB_METHODS)
@dashboard_bp.route('/pb/<path:subpath>', methods=PB_METHODS)
@login_required
def phone_bank(subpath=None):
    """Dashboard for any logged-in volunteer; no role check"""
    return render_template('dashboard/pb.html', user=current_user)
