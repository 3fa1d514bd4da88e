"""
Auth Routes

Registration and login with salted bcrypt passwords. The full user row is
kept in the server-side session; Flask-Login tracks the logged-in identity.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for, session
from flask_login import login_user, logout_user, current_user
from opencall.auth import auth_bp
from opencall.models import User, find_user, insert_user
from opencall.services import (
    sanitize_email,
    sanitize_name,
    is_valid_email,
    salt_password,
    hash_password_async,
    verify_password_async,
)

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['GET'])
def register_form():
    """Registration page"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.phone_bank'))
    return render_template('auth/register.html')


@auth_bp.route('/register', methods=['POST'])
async def register():
    """Create a volunteer account and send them to the login page"""
    email = sanitize_email(request.form.get('email', ''))
    first_name = sanitize_name(request.form.get('firstName', request.form.get('fname', '')))
    last_name = sanitize_name(request.form.get('lastName', request.form.get('lname', '')))
    password = salt_password(request.form.get('password', ''), current_app.config['PASSWORD_SALT'])

    # Validation
    if not password or not first_name or not last_name or not email:
        return render_template('auth/register.html', error='Please fill out all fields.')

    if not is_valid_email(email):
        return render_template('auth/register.html', error='Please enter a valid email.')

    # Not atomic with the insert below; concurrent requests can both pass
    if find_user(email) is not None:
        return render_template('auth/register.html', error='Email already in use.')

    password_hash = await hash_password_async(password, current_app.config['BCRYPT_ROUNDS'])
    insert_user(email, password_hash, first_name, last_name)
    logger.info("Registered volunteer %s", email)

    return redirect(url_for('auth.login_form'))


@auth_bp.route('/login', methods=['GET'])
def login_form():
    """Login page"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.phone_bank'))
    return render_template('auth/login.html')


@auth_bp.route('/login', methods=['POST'])
async def login():
    """Check credentials and start a session"""
    email = sanitize_email(request.form.get('email', ''))
    password = salt_password(request.form.get('password', ''), current_app.config['PASSWORD_SALT'])

    user = find_user(email)
    if user is None:
        logger.debug("Login attempt for unknown email %s", email)
        return render_template('auth/login.html', error='Email not found')

    if not await verify_password_async(password, user.password_hash):
        logger.info("Incorrect password for %s", email)
        return render_template('auth/login.html', error='Incorrect password.')

    session['user'] = user.to_dict()
    login_user(user)
    return redirect(url_for('dashboard.phone_bank'))


@auth_bp.route('/logout')
def logout():
    """Destroy the session, logged in or not"""
    logout_user()
    session.destroy()
    return redirect(url_for('dashboard.index'))


def load_session_user(user_id):
    """Flask-Login user loader backed by the row stored at login."""
    row = session.get('user')
    if not row or row.get('email') != user_id:
        return None
    return User.from_row(row)
