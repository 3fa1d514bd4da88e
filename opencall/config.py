"""
Configuration settings for OpenCall
"""
import json
import os


class ConfigurationError(RuntimeError):
    """Raised when the application cannot start with the given settings."""


# Keys used by the legacy config.json file
JSON_CONFIG_KEYS = {
    'sessionSecret': 'SECRET_KEY',
    'salt': 'PASSWORD_SALT',
    'port': 'PORT',
    'adminEmail': 'ADMIN_EMAIL',
}


class Config:
    """Flask application configuration"""
    
    # Signs the session id cookie
    SECRET_KEY = os.environ.get('SESSION_SECRET') or 'dev-session-secret-change-in-production'
    SESSION_COOKIE_NAME = 'opencall_session'
    SESSION_COOKIE_SECURE = False
    
    # Shared static string appended to every password before hashing
    PASSWORD_SALT = os.environ.get('PASSWORD_SALT', '')
    BCRYPT_ROUNDS = 10
    
    # Database configuration
    # Relative SQLite paths land in the instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///database.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Admin seeding
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    DEFAULT_ADMIN_PERMISSIONS = 'manageUsers&manageEvents'
    
    PORT = int(os.environ.get('PORT', 3000))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-session-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_SALT = 'pepper'
    BCRYPT_ROUNDS = 4
    ADMIN_EMAIL = 'admin@opencall.test'


def load_json_config(app, path):
    """Overlay settings from a legacy ``config.json`` onto ``app.config``.

    Only the known camelCase keys are read; anything else in the file is
    ignored. Returns the list of config names that were set.
    """
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    
    values = {}
    for json_key, config_key in JSON_CONFIG_KEYS.items():
        if json_key in data:
            values[config_key] = data[json_key]
    if 'PORT' in values:
        values['PORT'] = int(values['PORT'])
    
    app.config.from_mapping(values)
    return sorted(values)
