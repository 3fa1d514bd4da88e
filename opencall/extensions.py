"""
Flask Extensions

One instance of each per process, bound to the app in ``create_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for volunteer authentication
login_manager = LoginManager()
