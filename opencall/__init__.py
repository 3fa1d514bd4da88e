"""
OpenCall - Application Factory

Open source phone-banking software. This module provides the Flask
application factory that wires configuration, extensions, blueprints and
startup seeding into one application instance.
"""

import logging
import os

from flask import Flask
from opencall.config import Config, ConfigurationError, load_json_config
from opencall.extensions import db, login_manager
from opencall.sessions import ServerSideSessionInterface

logger = logging.getLogger(__name__)


def create_app(config_class=Config, config_file=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        config_file: Optional legacy ``config.json`` laid over the class
            values; defaults to the ``OPENCALL_CONFIG`` environment variable

    Returns:
        Configured Flask application instance

    Raises:
        ConfigurationError: if no admin email is configured
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    config_file = config_file or os.environ.get('OPENCALL_CONFIG')
    if config_file:
        loaded = load_json_config(app, config_file)
        logger.info("Loaded %s from %s", ', '.join(loaded) or 'nothing', config_file)

    if not app.config.get('ADMIN_EMAIL'):
        raise ConfigurationError('ADMIN_EMAIL must be set (adminEmail in config.json)')

    # Async views hash in a worker thread, so SQLite connections cross threads
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
        engine_options = app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {})
        engine_options.setdefault('connect_args', {}).setdefault('check_same_thread', False)

    # Server-side sessions, one store per application
    app.session_interface = ServerSideSessionInterface()

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login_form'
    login_manager.login_message = None

    # Register blueprints
    from opencall.auth import auth_bp
    from opencall.auth.routes import load_session_user
    from opencall.admin import admin_bp
    from opencall.dashboard import dashboard_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(dashboard_bp)

    login_manager.user_loader(load_session_user)

    # Create database tables
    with app.app_context():
        db.create_all()
        _ensure_admin(app)

    return app


def _ensure_admin(app):
    """Ensure the configured admin has a row in the admins table."""
    from opencall.models import ensure_admin

    email = app.config['ADMIN_EMAIL']
    if ensure_admin(email, app.config['DEFAULT_ADMIN_PERMISSIONS']):
        logger.info("Created admin row for %s", email)
    else:
        logger.debug("Admin row for %s already present", email)
